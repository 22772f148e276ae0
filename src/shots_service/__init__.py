"""
NBA Shots API Service Module.

This package contains the shots service implementation following a
three-layer architecture:

- handlers: Lambda entry point, routing and API responses
- logic: Operations on shot records
- dal: Data access layer for DynamoDB
- models: Shot record model and decoding rules
"""

__version__ = "1.0.0"
__description__ = "Serverless REST API for NBA shot records"

# Re-export commonly used names for convenience
from shots_service.models.shot import Shot
from shots_service.handlers.utils.observability import logger, metrics, tracer

__all__ = [
    "Shot",
    "logger",
    "metrics",
    "tracer",
]
