"""
Shots Lambda Function - Entry point for the shots API.

This module serves as the Lambda function entry point that delegates to the
shots handler in the service package.
"""

import os
import sys
from typing import Any, Dict

# Add the service package to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from shots_service.handlers.shots_handler import lambda_handler as shots_handler


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda function entry point for the shots API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return shots_handler(event, context)
