"""
Data Access Layer (DAL) for the customers service.

This module provides the data access layer interface and the factory that
builds the process-wide FaunaDB handler.
"""

from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any, Protocol, runtime_checkable

from customers_service.handlers.models.env_vars import CustomersHandlerEnvVars
from customers_service.models.output import QueryOutcome


@runtime_checkable
class CustomersDalHandler(Protocol):
    """Protocol defining the data access layer interface."""

    index_name: str

    def run_query(self, expression: Any) -> QueryOutcome:
        """Run a read query and return its outcome."""
        ...


class BaseDalHandler(ABC):
    """Abstract base class for data access layer implementations."""

    def __init__(self, config: CustomersHandlerEnvVars) -> None:
        """
        Initialize the DAL handler.

        Args:
            config: Parsed handler configuration
        """
        self.config = config
        self.index_name = config.CUSTOMERS_INDEX_NAME

    @abstractmethod
    def run_query(self, expression: Any) -> QueryOutcome:
        """Run a read query and return its outcome."""
        pass


@lru_cache(maxsize=1)
def get_dal_handler() -> CustomersDalHandler:
    """
    Factory function returning the process-wide DAL handler.

    The handler is built on first use from the environment and reused by every
    later invocation. A failed build is not cached.

    Returns:
        DAL handler instance

    Raises:
        MissingDatabaseSecretError: If FAUNADB_SECRET_KEY is empty
    """
    # Import here to avoid circular imports
    from customers_service.dal.fauna_handler import FaunaDbHandler
    from customers_service.handlers.models.env_vars import get_handler_env_vars

    return FaunaDbHandler(get_handler_env_vars())


__all__ = [
    'CustomersDalHandler',
    'BaseDalHandler',
    'get_dal_handler',
]
