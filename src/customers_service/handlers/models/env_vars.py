"""
Environment variable models for type-safe configuration.

The customers handler reads its FaunaDB connection settings from the
environment once per process and passes the parsed model into the data
access layer.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import get_environment_variables
from pydantic import BaseModel, Field


class CustomersHandlerEnvVars(BaseModel):
    """Environment variables for the customers Lambda handler."""

    # FaunaDB access secret; empty means not configured
    FAUNADB_SECRET_KEY: Annotated[str, Field(
        description='FaunaDB secret used to authorize queries',
        repr=False,
    )] = ''

    FAUNADB_DOMAIN: Annotated[str, Field(
        description='FaunaDB API host',
        min_length=1,
    )] = 'db.fauna.com'

    FAUNADB_SCHEME: Annotated[str, Field(
        description='Scheme used to reach the FaunaDB API',
        pattern=r'^(https|http)$',
    )] = 'https'

    FAUNADB_PORT: Annotated[Optional[int], Field(
        description='FaunaDB API port, defaults to the scheme port',
        ge=1,
        le=65535,
    )] = None

    FAUNADB_TIMEOUT_SECONDS: Annotated[int, Field(
        description='Read timeout for FaunaDB queries in seconds',
        ge=1,
        le=300,
    )] = 60

    CUSTOMERS_INDEX_NAME: Annotated[str, Field(
        description='Secondary index that matches every customer record',
        min_length=1,
    )] = 'all_customers'

    CORS_ALLOW_ORIGIN: Annotated[str, Field(
        description='CORS allowed origins for API responses',
    )] = '*'

    @property
    def secret_configured(self) -> bool:
        return bool(self.FAUNADB_SECRET_KEY)


def get_handler_env_vars() -> CustomersHandlerEnvVars:
    """
    Get typed environment variables for the customers handler.

    Returns:
        Validated environment variables model instance
    """
    return get_environment_variables(model=CustomersHandlerEnvVars)
