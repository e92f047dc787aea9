"""
Output models for the customers query and API responses.

Customer records are kept as open key/value mappings: the handler never
inspects record fields, it only forwards what the database returned.
"""

from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field, model_validator

CustomerRecord = dict[str, Any]


class CustomersPage(BaseModel):
    """One page of customer records returned by a paginated index match."""

    data: Annotated[list[CustomerRecord], Field(
        description='Customer records in the order the index returned them',
    )]

    before: Annotated[Optional[Any], Field(
        description='Cursor to the previous page, if any',
    )] = None

    after: Annotated[Optional[Any], Field(
        description='Cursor to the next page, if any',
    )] = None

    @classmethod
    def from_query_result(cls, result: dict[str, Any]) -> 'CustomersPage':
        """Build a page from the raw dictionary returned by ``FaunaClient.query``."""
        return cls(
            data=result.get('data', []),
            before=result.get('before'),
            after=result.get('after'),
        )

    @property
    def has_more(self) -> bool:
        return self.after is not None


class QueryOutcome(BaseModel):
    """Result of a database call: either a page of records or an error message."""

    page: Optional[CustomersPage] = None
    error: Optional[str] = None

    @model_validator(mode='after')
    def _exactly_one(self) -> 'QueryOutcome':
        if (self.page is None) == (self.error is None):
            raise ValueError('QueryOutcome needs exactly one of page or error')
        return self

    @classmethod
    def success(cls, page: CustomersPage) -> 'QueryOutcome':
        return cls(page=page)

    @classmethod
    def failure(cls, message: str) -> 'QueryOutcome':
        return cls(error=message)

    @property
    def ok(self) -> bool:
        return self.page is not None


class ErrorOutput(BaseModel):
    """Body of a failed customers request."""

    error: Annotated[str, Field(
        description='Human readable description of the failure',
        examples=['index not found'],
    )]
