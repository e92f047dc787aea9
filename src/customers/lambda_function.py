"""
Customers Lambda Function - Entry point for the customers API.

Delegates to the customers handler of the service package, which lists the
``all_customers`` FaunaDB index and returns the records as JSON.
"""

import os
import sys
from typing import Any, Dict

# Add the service package to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from customers_service.handlers.customers_handler import lambda_handler as customers_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the customers API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return customers_handler(event, context)
