"""
Pytest configuration and shared fixtures for the shots service.

This module provides common test fixtures and configuration used across
unit and integration tests.
"""

import os

# Environment must be in place before the service modules are imported
os.environ.update({
    "AWS_DEFAULT_REGION": "us-east-1",
    "AWS_ACCESS_KEY_ID": "test",
    "AWS_SECRET_ACCESS_KEY": "test",
    "TABLE_NAME": "test-shots-table",
    "PLAYER_INDEX_NAME": "player_idIndex",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_SERVICE_NAME": "nba-shots-api",
    "POWERTOOLS_METRICS_NAMESPACE": "NbaShots",
    "POWERTOOLS_TRACE_DISABLED": "true",
    "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",
})

import json
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

from shots_service.dal import StoreError, reset_dal_handler
from shots_service.handlers.utils.observability import metrics

TABLE_NAME = "test-shots-table"


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset process-wide state between tests."""
    metrics.clear_metrics()
    reset_dal_handler()
    yield
    metrics.clear_metrics()
    reset_dal_handler()


@pytest.fixture
def metric_total():
    """Sum of the values recorded for one metric in the pending metric set."""

    def total(name: str) -> float:
        return sum(metrics.metric_set.get(name, {}).get("Value", []))

    return total


# DynamoDB fixtures
@pytest.fixture
def dynamodb_table():
    """Create a mock DynamoDB table for testing."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        table = dynamodb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "id", "AttributeType": "S"},
                {"AttributeName": "player_id", "AttributeType": "S"},
            ],
            GlobalSecondaryIndexes=[
                {
                    "IndexName": "player_idIndex",
                    "KeySchema": [
                        {"AttributeName": "player_id", "KeyType": "HASH"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                }
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        table.wait_until_exists()
        yield table


class InMemoryShotsStore:
    """Dict-backed ShotsStore used by unit tests."""

    def __init__(self, items: Optional[List[Dict[str, Any]]] = None, error: Optional[Exception] = None):
        self.items: Dict[str, Dict[str, Any]] = {item["id"]: item for item in items or []}
        self.error = error
        self.put_calls: List[Dict[str, Any]] = []

    def scan_all(self) -> List[Dict[str, Any]]:
        if self.error:
            raise self.error
        return list(self.items.values())

    def query_by_player(self, player_id: str) -> List[Dict[str, Any]]:
        if self.error:
            raise self.error
        return [item for item in self.items.values() if item.get("player_id") == player_id]

    def put_item(self, item: Dict[str, Any]) -> None:
        self.put_calls.append(item)
        if self.error:
            raise self.error
        self.items[item["id"]] = item


@pytest.fixture
def shots_store() -> InMemoryShotsStore:
    """Empty in-memory store."""
    return InMemoryShotsStore()


@pytest.fixture
def failing_store() -> InMemoryShotsStore:
    """Store whose every call fails with a detailed internal error."""
    return InMemoryShotsStore(error=StoreError(operation="Scan", table_name="secret-internal-table"))


# Sample data fixtures
@pytest.fixture
def sample_shot_data() -> Dict[str, Any]:
    """Complete shot record as sent by API clients."""
    return {
        "id": "shot-1",
        "player_id": "201939",
        "player": "Stephen Curry",
        "team": "Golden State Warriors",
        "game_date": "2023-10-24",
        "quarter": 4,
        "time_left": "01:32",
        "x": -22.5,
        "y": 8.1,
        "shot_type": "3PT Field Goal",
        "outcome": "made",
        "action_type": "Pullup Jump Shot",
        "basic_zone": "Above the Break 3",
        "shots_made": 1,
    }


@pytest.fixture
def api_gateway_event():
    """Factory for API Gateway REST proxy events."""

    def create_event(
        http_method: str = "GET",
        resource: str = "/shots",
        path_parameters: Optional[Dict[str, str]] = None,
        body: Any = None,
    ) -> Dict[str, Any]:
        path = resource
        for name, value in (path_parameters or {}).items():
            path = path.replace(f"{{{name}}}", value)
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        return {
            "resource": resource,
            "path": path,
            "httpMethod": http_method,
            "headers": {"Content-Type": "application/json"},
            "pathParameters": path_parameters,
            "queryStringParameters": None,
            "requestContext": {
                "requestId": "test-request-id-123",
                "stage": "test",
                "resourcePath": resource,
                "httpMethod": http_method,
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return create_event


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-shots-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-shots-function"
    context.memory_limit_in_mb = "512"
    context.aws_request_id = "test-request-id-123"
    return context


# Error simulation fixtures
@pytest.fixture
def mock_dynamodb_error():
    """Build botocore ClientErrors for testing error handling."""
    from botocore.exceptions import ClientError

    def create_error(error_code: str, message: str = "Test error"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name="TestOperation"
        )

    return create_error


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


@pytest.fixture
def store_factory():
    """Factory building in-memory stores preloaded with items or failing with an error."""
    return InMemoryShotsStore
