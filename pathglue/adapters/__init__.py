from .manager import available_adapters, ensure_materialized, get_proxy

__all__ = ["available_adapters", "ensure_materialized", "get_proxy"]
