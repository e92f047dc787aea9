"""
Pytest configuration and shared fixtures for the customers API.

This module provides the test environment, Lambda context and API Gateway
event fixtures, and a fake FaunaDB client wired into the data access layer.
"""

import json
import os
import pytest
from typing import Any, Dict
from unittest.mock import Mock, patch

# Powertools reads these when the service package is first imported,
# so they are set before test modules are collected.
os.environ.update({
    "FAUNADB_SECRET_KEY": "test-secret",
    "POWERTOOLS_SERVICE_NAME": "test-customers-api",
    "POWERTOOLS_METRICS_NAMESPACE": "TestCustomersApi",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "LOG_LEVEL": "DEBUG",
})

from faunadb.request_result import RequestResult

from customers_service.dal import get_dal_handler
from customers_service.dal.fauna_handler import FaunaDbHandler
from customers_service.handlers.models.env_vars import CustomersHandlerEnvVars


# Configuration fixtures
@pytest.fixture
def handler_config() -> CustomersHandlerEnvVars:
    """Handler configuration with a FaunaDB secret."""
    return CustomersHandlerEnvVars(FAUNADB_SECRET_KEY="test-secret")


# Sample data fixtures
@pytest.fixture
def customer_records() -> list:
    """Customer documents as returned by Get(ref)."""
    return [
        {"id": 1, "name": "Alice Johnson", "email": "alice@example.com"},
        {"id": 2, "name": "Bob Wilson", "email": "bob@example.com"},
    ]


# FaunaDB fixtures
@pytest.fixture
def fake_fauna_client(customer_records):
    """Mock FaunaClient whose query returns one page of customers."""
    client = Mock()
    client.query.return_value = {"data": customer_records}
    return client


@pytest.fixture
def fauna_dal(handler_config, fake_fauna_client) -> FaunaDbHandler:
    """FaunaDB handler backed by the fake client."""
    return FaunaDbHandler(handler_config, client=fake_fauna_client)


@pytest.fixture
def patched_dal(fauna_dal):
    """Make the logic layer use the fake-client handler."""
    with patch("customers_service.logic.list_customers.get_dal_handler", return_value=fauna_dal):
        yield fauna_dal


@pytest.fixture
def fauna_http_error():
    """Build the HttpError subclass the driver raises for an error response."""
    def create_error(error_cls, code: str, description: str, status_code: int):
        response_content = {"errors": [{"code": code, "description": description}]}
        request_result = RequestResult(
            "POST", "/", None, {}, json.dumps(response_content), response_content,
            status_code, {}, 0, 0,
        )
        return error_cls(request_result)

    return create_error


@pytest.fixture
def api_gateway_event() -> Dict[str, Any]:
    """Create a sample API Gateway event for testing."""
    return {
        "httpMethod": "GET",
        "path": "/api/customers",
        "headers": {
            "Accept": "application/json",
            "User-Agent": "test-agent/1.0",
        },
        "body": None,
        "requestContext": {
            "requestId": "test-request-id-123",
            "accountId": "123456789012",
            "stage": "test",
            "httpMethod": "GET",
            "path": "/api/customers",
            "protocol": "HTTP/1.1",
            "requestTime": "2024-01-01T12:00:00.000Z",
            "requestTimeEpoch": 1704110400000,
            "identity": {
                "sourceIp": "127.0.0.1",
                "userAgent": "test-agent/1.0",
            },
        },
        "pathParameters": None,
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "stageVariables": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-customers-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-customers-function"
    context.memory_limit_in_mb = 512
    context.get_remaining_time_in_millis.return_value = 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-customers-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def reset_dal_handler():
    """Drop the cached process-wide DAL handler between tests."""
    get_dal_handler.cache_clear()
    yield
    get_dal_handler.cache_clear()
