"""
Shared AWS Lambda Powertools instances for the customers function.

Every layer logs, traces and emits metrics through the objects defined here so
that the correlation id injected by the handler shows up on all log lines.
"""

import os

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

SERVICE_NAME = os.getenv('POWERTOOLS_SERVICE_NAME', 'customers-api')
METRICS_NAMESPACE = os.getenv('POWERTOOLS_METRICS_NAMESPACE', 'CustomersApi')

# Level comes from LOG_LEVEL / POWERTOOLS_LOG_LEVEL
logger: Logger = Logger(service=SERVICE_NAME)

# POWERTOOLS_TRACE_DISABLED=true turns X-Ray off (tests, local runs)
tracer: Tracer = Tracer(service=SERVICE_NAME)

metrics: Metrics = Metrics(namespace=METRICS_NAMESPACE, service=SERVICE_NAME)
