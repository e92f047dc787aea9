"""
Business logic for listing customers.

The listing is a single declarative FaunaDB query evaluated entirely by the
database: match the customers index, paginate the matches and fetch the
document behind every reference on the page. No page size or cursor is
passed, so only the first page is ever returned.
"""

from typing import Any, Optional

from faunadb import query as q

from customers_service.dal import CustomersDalHandler, get_dal_handler
from customers_service.errors import CustomersServiceError
from customers_service.handlers.utils.observability import logger, tracer
from customers_service.models.output import QueryOutcome

DEFAULT_INDEX_NAME = 'all_customers'


def build_customers_query(index_name: str = DEFAULT_INDEX_NAME) -> Any:
    """Map(Paginate(Match(Index(index_name))), Lambda(ref, Get(ref)))"""
    return q.map_(
        q.lambda_('ref', q.get(q.var('ref'))),
        q.paginate(q.match(q.index(index_name))),
    )


@tracer.capture_method(capture_response=False)
def list_customers(dal_handler: Optional[CustomersDalHandler] = None) -> QueryOutcome:
    """
    Fetch the first page of customer records.

    Args:
        dal_handler: Data access handler, defaults to the process-wide FaunaDB handler

    Returns:
        QueryOutcome with the fetched page or the failure message
    """
    try:
        if dal_handler is None:
            dal_handler = get_dal_handler()
    except CustomersServiceError as e:
        logger.error(f'Customers data access is not available: {e}')
        return QueryOutcome.failure(str(e))

    index_name = dal_handler.index_name
    tracer.put_annotation('index_name', index_name)
    logger.info('Listing customers', extra={'index_name': index_name})

    return dal_handler.run_query(build_customers_query(index_name))
