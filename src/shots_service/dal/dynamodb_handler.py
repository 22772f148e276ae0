"""
DynamoDB implementation of the shots Data Access Layer.

Each operation issues exactly one DynamoDB request. Results are not paginated:
a truncated Scan or Query returns only the first page.
"""

from typing import Any, Dict, List, Optional

import boto3
from boto3.dynamodb.conditions import Key
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from shots_service.dal import StoreError
from shots_service.handlers.utils.observability import logger


class DynamoDbHandler:
    """DynamoDB implementation of the ShotsStore protocol."""

    def __init__(
        self,
        table_name: str,
        player_index_name: str = 'player_idIndex',
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        connect_timeout: int = 5,
        read_timeout: int = 10,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialize the DynamoDB handler.

        Args:
            table_name: Name of the DynamoDB table
            player_index_name: Name of the GSI keyed on player_id
            region_name: AWS region name
            endpoint_url: DynamoDB endpoint URL (for local testing)
            connect_timeout: Socket connect timeout in seconds
            read_timeout: Socket read timeout in seconds
            max_attempts: Total attempts of the botocore retry handler
        """
        self.table_name = table_name
        self.player_index_name = player_index_name

        client_config = Config(
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            retries={'max_attempts': max_attempts, 'mode': 'standard'},
        )
        self.dynamodb = boto3.resource(
            'dynamodb',
            region_name=region_name,
            endpoint_url=endpoint_url,
            config=client_config,
        )
        self.table = self.dynamodb.Table(table_name)

        logger.debug('DynamoDB handler initialized', extra={'table_name': table_name, 'endpoint_url': endpoint_url})

    def scan_all(self) -> List[Dict[str, Any]]:
        """
        Read every item of the table with a single Scan request.

        Returns:
            Raw items, in no particular order

        Raises:
            StoreError: If the Scan request fails
        """
        try:
            response = self.table.scan()
        except (ClientError, BotoCoreError) as exc:
            raise self._store_error('Scan', exc) from exc

        if 'LastEvaluatedKey' in response:
            logger.warning('Scan result truncated, remaining pages are not read', extra={'table_name': self.table_name})

        return response.get('Items', [])

    def query_by_player(self, player_id: str) -> List[Dict[str, Any]]:
        """
        Read the items of one player through the player index.

        Args:
            player_id: Exact player_id to match

        Returns:
            Raw items, in no particular order

        Raises:
            StoreError: If the Query request fails
        """
        try:
            response = self.table.query(
                IndexName=self.player_index_name,
                KeyConditionExpression=Key('player_id').eq(player_id),
            )
        except (ClientError, BotoCoreError) as exc:
            raise self._store_error('Query', exc) from exc

        if 'LastEvaluatedKey' in response:
            logger.warning('Query result truncated, remaining pages are not read', extra={'table_name': self.table_name})

        return response.get('Items', [])

    def put_item(self, item: Dict[str, Any]) -> None:
        """
        Write one item, replacing any item with the same id.

        Raises:
            StoreError: If the PutItem request fails
        """
        try:
            self.table.put_item(Item=item)
        except (ClientError, BotoCoreError) as exc:
            raise self._store_error('PutItem', exc) from exc

    def _store_error(self, operation: str, exc: Exception) -> StoreError:
        if isinstance(exc, ClientError):
            logger.error(
                f'DynamoDB {operation} error',
                extra={
                    'error_code': exc.response.get('Error', {}).get('Code'),
                    'error': str(exc),
                    'table_name': self.table_name,
                },
            )
        else:
            logger.error(f'DynamoDB connection error during {operation}', extra={'error': str(exc), 'table_name': self.table_name})
        return StoreError(operation=operation, table_name=self.table_name)
