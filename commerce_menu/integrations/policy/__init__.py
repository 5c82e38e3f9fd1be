"""
Integration policy: caching/deduplication of Catalog Service calls
(category_service.py) and interpretation of their responses
(response_wrappers.py).
"""
