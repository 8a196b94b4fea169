"""Repository name cache and inventory sources."""

from resvn.cache.inventory import InventorySource, RestInventorySource
from resvn.cache.repository_cache import RepositoryCache, locate_file

__all__ = ["InventorySource", "RepositoryCache", "RestInventorySource", "locate_file"]
