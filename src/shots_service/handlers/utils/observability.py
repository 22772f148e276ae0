"""
Centralized observability utilities for the shots Lambda handler.

This module provides configured instances of AWS Lambda Powertools for logging,
tracing, and metrics collection, plus a decorator that runs a call inside a
named X-Ray subsegment.
"""

import functools
from typing import Any, Callable, TypeVar

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.metrics import Metrics
from aws_lambda_powertools.tracing import Tracer

F = TypeVar('F', bound=Callable[..., Any])

# Metrics namespace for business KPIs
METRICS_NAMESPACE = 'NbaShots'

SERVICE_NAME = 'nba-shots-api'

# JSON output format, service name can be set by environment variable "POWERTOOLS_SERVICE_NAME"
logger: Logger = Logger(service=SERVICE_NAME)

# Disabled by setting POWERTOOLS_TRACE_DISABLED to "true" and outside the Lambda runtime
tracer: Tracer = Tracer(service=SERVICE_NAME)

# Namespace and service name can be set by environment variables:
# - POWERTOOLS_METRICS_NAMESPACE
# - POWERTOOLS_SERVICE_NAME
metrics = Metrics(namespace=METRICS_NAMESPACE, service=SERVICE_NAME)


def traced_operation(segment_name: str) -> Callable[[F], F]:
    """
    Run the decorated function inside an X-Ray subsegment named ``## <segment_name>``.

    The subsegment is closed on every exit path; an escaping exception is
    attached to it as metadata and re-raised unchanged.

    Args:
        segment_name: Name of the subsegment, e.g. ``GetAllShots``
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            with tracer.provider.in_subsegment(name=f'## {segment_name}') as subsegment:
                subsegment.put_annotation(key='operation', value=segment_name)
                try:
                    return func(*args, **kwargs)
                except Exception as exc:
                    subsegment.put_metadata(key=f'{segment_name} error', value=exc, namespace=tracer.service)
                    raise

        return wrapper  # type: ignore[return-value]

    return decorator
