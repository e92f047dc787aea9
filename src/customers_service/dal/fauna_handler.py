"""
FaunaDB implementation of the Data Access Layer (DAL).

The handler owns a single ``FaunaClient`` for the lifetime of the process and
turns every query into a ``QueryOutcome``: client failures are reported as an
error message instead of being raised.
"""

from typing import Any, Optional

from faunadb.client import FaunaClient
from faunadb.errors import FaunaError, HttpError

from customers_service.dal import BaseDalHandler
from customers_service.errors import MissingDatabaseSecretError
from customers_service.handlers.models.env_vars import CustomersHandlerEnvVars
from customers_service.handlers.utils.observability import logger, tracer
from customers_service.models.output import CustomersPage, QueryOutcome


def fauna_error_message(error: FaunaError) -> str:
    """Human readable description of a FaunaDB error."""
    # str() of an HttpError is the repr of its first ErrorData
    if isinstance(error, HttpError) and error.errors:
        return error.errors[0].description
    return str(error.args[0]) if error.args else str(error)


class FaunaDbHandler(BaseDalHandler):
    """FaunaDB implementation of the data access layer."""

    def __init__(self, config: CustomersHandlerEnvVars, client: Optional[FaunaClient] = None) -> None:
        """
        Initialize the FaunaDB handler.

        Args:
            config: Parsed handler configuration
            client: Pre-built client, used instead of building one from config

        Raises:
            MissingDatabaseSecretError: If no client is given and the secret is empty
        """
        super().__init__(config)
        if client is None:
            if not config.secret_configured:
                logger.error('FaunaDB secret is not configured')
                raise MissingDatabaseSecretError()
            client = FaunaClient(
                secret=config.FAUNADB_SECRET_KEY,
                domain=config.FAUNADB_DOMAIN,
                scheme=config.FAUNADB_SCHEME,
                port=config.FAUNADB_PORT,
                timeout=config.FAUNADB_TIMEOUT_SECONDS,
            )
        self.client = client
        logger.debug(f'FaunaDB handler initialized for domain: {config.FAUNADB_DOMAIN}')

    @tracer.capture_method(capture_response=False)
    def run_query(self, expression: Any) -> QueryOutcome:
        """
        Run a read query against FaunaDB.

        Args:
            expression: FaunaDB query expression evaluating to a page

        Returns:
            QueryOutcome holding the page on success or the error message on failure
        """
        try:
            result = self.client.query(expression)
            page = CustomersPage.from_query_result(result)
        except FaunaError as e:
            message = fauna_error_message(e)
            logger.error(f'FaunaDB query failed: {message}', extra={'error_type': type(e).__name__})
            return QueryOutcome.failure(message)
        except Exception as e:
            logger.exception('Unexpected error querying FaunaDB', extra={'error': str(e)})
            return QueryOutcome.failure(str(e))

        logger.info(f'Retrieved {len(page.data)} records from FaunaDB', extra={'has_more': page.has_more})
        tracer.put_annotation('record_count', len(page.data))

        return QueryOutcome.success(page)
