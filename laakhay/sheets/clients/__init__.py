"""High-level clients."""

from .sheet_client import SheetClient, close_default_client, get_default_client, query

__all__ = ["SheetClient", "close_default_client", "get_default_client", "query"]
