"""
Root link resolution for storefront paths.
"""
from commerce_menu.integrations.contracts.interfaces import RootLinkResolver


def make_root_link(root_path: str = "/") -> RootLinkResolver:
    """Return a resolver that prefixes paths with the site root (e.g. ``/en-us/``)."""
    root = (root_path or "").strip().rstrip("/")
    if root and not root.startswith("/"):
        root = f"/{root}"

    def root_link(path: str) -> str:
        if not root:
            return path
        if path == root or path.startswith(f"{root}/"):
            return path
        return f"{root}{path}" if path.startswith("/") else f"{root}/{path}"

    return root_link
