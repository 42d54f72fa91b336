"""Storage adapters."""

from actionscribe.adapters.storage.sql_store import SqlActionStore

__all__ = ["SqlActionStore"]
