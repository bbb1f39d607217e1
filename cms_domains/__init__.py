"""
CMS domain registry.

Manages hostname-to-content mappings ("domains") used for multi-site
routing, with cancelable save/delete notifications.
"""
from cms_domains.version import __version__

__all__ = ["__version__"]
