"""
AWS Lambda Handlers Module.

Entry points for the customers service. The handler layer reads nothing from
the request, delegates the listing to the logic layer and owns the mapping of
the query outcome onto API Gateway responses.

The handlers use AWS Lambda Powertools for structured logging with
correlation ids, X-Ray tracing and CloudWatch EMF metrics.
"""

from customers_service.handlers.utils.observability import logger, tracer, metrics

__all__ = [
    "logger",
    "tracer",
    "metrics",
]
