from .service import CACHE_POLICIES, CachePolicy, GatewayCaches

__all__ = ["CACHE_POLICIES", "CachePolicy", "GatewayCaches"]
