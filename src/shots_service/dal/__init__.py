"""
Data Access Layer (DAL) for the shots service.

This module provides the store interface used by the handlers, the single
error type every store implementation raises, and the process-wide factory
that builds the DynamoDB implementation on first use.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


class StoreError(Exception):
    """Raised for any failure of the underlying store (I/O, throttling, decoding)."""

    def __init__(self, operation: str, table_name: str) -> None:
        super().__init__(f'{operation} failed on table {table_name}')
        self.operation = operation
        self.table_name = table_name


@runtime_checkable
class ShotsStore(Protocol):
    """Protocol defining the shot store capabilities."""

    def scan_all(self) -> List[Dict[str, Any]]:
        """Return every raw item currently in the store, unordered."""
        ...

    def query_by_player(self, player_id: str) -> List[Dict[str, Any]]:
        """Return the raw items whose player_id equals ``player_id``."""
        ...

    def put_item(self, item: Dict[str, Any]) -> None:
        """Upsert one item keyed by id."""
        ...


_dal_handler: Optional[ShotsStore] = None


def get_dal_handler() -> ShotsStore:
    """
    Get or create the process-wide store.

    The DynamoDB handler is built from the environment on first call and
    shared by every later invocation in the same container.
    """
    global _dal_handler

    if _dal_handler is None:
        # Import here to avoid circular imports
        from shots_service.dal.dynamodb_handler import DynamoDbHandler
        from shots_service.handlers.models.env_vars import get_handler_env_vars

        env_vars = get_handler_env_vars()
        _dal_handler = DynamoDbHandler(
            table_name=env_vars.TABLE_NAME,
            player_index_name=env_vars.PLAYER_INDEX_NAME,
            region_name=env_vars.AWS_REGION,
            endpoint_url=env_vars.DYNAMODB_ENDPOINT,
            connect_timeout=env_vars.DB_CONNECTION_TIMEOUT,
            read_timeout=env_vars.DB_READ_TIMEOUT,
            max_attempts=env_vars.DB_MAX_ATTEMPTS,
        )

    return _dal_handler


def reset_dal_handler() -> None:
    """Drop the process-wide store so the next call rebuilds it."""
    global _dal_handler
    _dal_handler = None


__all__ = [
    'ShotsStore',
    'StoreError',
    'get_dal_handler',
    'reset_dal_handler',
]
