"""
Environment variable models for type-safe configuration.

This module defines the Pydantic model for environment variables used by the
shots handler, parsed and cached through aws-lambda-env-modeler.
"""

from typing import Annotated, Optional

from aws_lambda_env_modeler import BaseModel, get_environment_variables
from pydantic import Field


class ShotsHandlerEnvVars(BaseModel):
    """Environment variables for the shots Lambda handler."""

    # DynamoDB table holding shot records, keyed by id
    TABLE_NAME: Annotated[str, Field(
        description='DynamoDB table name for shot storage',
        min_length=1
    )]

    # Global secondary index keyed on player_id
    PLAYER_INDEX_NAME: Annotated[str, Field(
        description='DynamoDB GSI used for player queries',
        min_length=1
    )] = 'player_idIndex'

    # Local DynamoDB endpoint, e.g. http://localhost:8000
    DYNAMODB_ENDPOINT: Annotated[Optional[str], Field(
        description='DynamoDB endpoint URL override for local testing'
    )] = None

    AWS_REGION: Annotated[Optional[str], Field(
        description='AWS region of the DynamoDB table'
    )] = None

    # Transport settings of the boto3 client
    DB_CONNECTION_TIMEOUT: Annotated[int, Field(
        description='Database connection timeout in seconds',
        ge=1,
        le=300
    )] = 5

    DB_READ_TIMEOUT: Annotated[int, Field(
        description='Database read timeout in seconds',
        ge=1,
        le=300
    )] = 10

    DB_MAX_ATTEMPTS: Annotated[int, Field(
        description='Total attempts made by the botocore retry handler',
        ge=1,
        le=10
    )] = 3

    # When false, inserts only persist id, player_id and player
    STORE_ALL_SHOT_FIELDS: Annotated[str, Field(
        description='Persist every decoded shot field on insert (true/false)',
        pattern=r'^(true|false)$'
    )] = 'false'

    @property
    def store_all_shot_fields(self) -> bool:
        """Check if inserts persist the full shot record."""
        return self.STORE_ALL_SHOT_FIELDS.lower() == 'true'


def get_handler_env_vars() -> ShotsHandlerEnvVars:
    """
    Get typed environment variables for the shots handler.

    Returns:
        Validated environment variables model instance

    Raises:
        ValueError: If a variable is missing or invalid
    """
    return get_environment_variables(model=ShotsHandlerEnvVars)
