"""
AWS Lambda Handlers Module.

This module contains the Lambda handler that serves as the entry point of the
shots API. The handler layer is responsible for:

1. Routing API Gateway events on method and resource template
2. Mapping operation outcomes to JSON proxy responses
3. Opening an X-Ray subsegment around dispatch and every operation
"""

# Re-export handler utilities for convenience
from shots_service.handlers.utils.observability import logger, metrics, tracer

__all__ = [
    "logger",
    "metrics",
    "tracer",
]
