"""
Customers API Service Module.

This package contains the service implementation for the customers listing
function, following the three-layer architecture pattern:

- handlers: Lambda entry points and HTTP response mapping
- logic: the fixed customers query and its outcome
- dal: FaunaDB client access
- models: Pydantic models for query results and error bodies
"""

__version__ = "1.0.0"
__description__ = "Serverless customers listing backed by FaunaDB"

from customers_service.models.output import CustomersPage, ErrorOutput, QueryOutcome
from customers_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "CustomersPage",
    "ErrorOutput",
    "QueryOutcome",
    "logger",
    "tracer",
    "metrics",
]
