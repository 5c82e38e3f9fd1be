"""
Utility modules for the category menu
"""
from .cache_keys import create_hash_from_headers
from .config_loader import CommerceConfig, StaticConfigProvider, load_commerce_config
from .root_link import make_root_link

__all__ = [
    'create_hash_from_headers',
    'CommerceConfig',
    'StaticConfigProvider',
    'load_commerce_config',
    'make_root_link',
]
