"""
Customers Handler - Lambda function listing every customer record.

Each invocation runs one fixed FaunaDB query through the logic layer and
maps its outcome onto the HTTP response: 200 with the array of records, or
500 with ``{"error": <message>}``. Request content is never read.
"""

from typing import Any, Dict

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from customers_service.handlers.models.env_vars import get_handler_env_vars
from customers_service.handlers.utils.observability import logger, metrics, tracer
from customers_service.handlers.utils.serialization import build_response
from customers_service.logic.list_customers import list_customers
from customers_service.models.output import ErrorOutput, QueryOutcome

DEFAULT_CORS_ALLOW_ORIGIN = '*'


def _error_response(message: str, request_id: str, allow_origin: str) -> Dict[str, Any]:
    metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
    return build_response(
        status_code=500,
        body=ErrorOutput(error=message).model_dump(),
        request_id=request_id,
        allow_origin=allow_origin,
    )


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler(capture_response=False)
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Customers Lambda function handler.

    Args:
        event: API Gateway proxy event, accepted for any method and path
        context: Lambda context object

    Returns:
        API Gateway response with the customer records or the error message
    """
    request_id = context.aws_request_id
    allow_origin = DEFAULT_CORS_ALLOW_ORIGIN

    logger.info(
        "Lambda invocation started",
        extra={
            "path": event.get("path"),
            "http_method": event.get("httpMethod"),
            "remaining_time_ms": context.get_remaining_time_in_millis(),
        },
    )
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

    try:
        config = get_handler_env_vars()
        allow_origin = config.CORS_ALLOW_ORIGIN

        outcome: QueryOutcome = list_customers()
        if not outcome.ok:
            logger.error("Customers query failed", extra={"error": outcome.error})
            return _error_response(outcome.error, request_id, allow_origin)

        # Cursors stay behind: only the records of the first page are returned
        records = outcome.page.data
        response = build_response(
            status_code=200,
            body=records,
            request_id=request_id,
            allow_origin=allow_origin,
        )

        metrics.add_metric(name="SuccessCount", unit=MetricUnit.Count, value=1)
        metrics.add_metric(name="CustomerCount", unit=MetricUnit.Count, value=len(records))
        logger.info("Lambda invocation completed successfully", extra={"customer_count": len(records)})
        return response

    except Exception as e:
        logger.exception("Lambda invocation failed", extra={"error": str(e)})
        return _error_response(str(e), request_id, allow_origin)
