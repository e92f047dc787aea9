"""
Service Models Package

Pydantic models for the customers query result and API error bodies.
"""

from .output import CustomerRecord, CustomersPage, ErrorOutput, QueryOutcome

__all__ = [
    "CustomerRecord",
    "CustomersPage",
    "ErrorOutput",
    "QueryOutcome",
]
