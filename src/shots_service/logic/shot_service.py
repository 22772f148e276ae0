"""
Business logic for shot records.

Each function performs exactly one store call. Store failures surface as
StoreError and decoding failures as pydantic.ValidationError; mapping them to
HTTP responses is left to the handler layer.
"""

from typing import List

from shots_service.dal import ShotsStore
from shots_service.handlers.utils.observability import logger
from shots_service.models.shot import Shot, shots_from_items


def list_all_shots(dal: ShotsStore) -> List[Shot]:
    """
    Fetch every shot in the store.

    Raises:
        StoreError: If the scan fails
        pydantic.ValidationError: If any stored item is malformed
    """
    logger.info('Fetching all shots from DynamoDB')
    items = dal.scan_all()
    shots = shots_from_items(items)
    logger.info('Fetched shots', extra={'shot_count': len(shots)})
    return shots


def list_player_shots(dal: ShotsStore, player_id: str) -> List[Shot]:
    """
    Fetch the shots of one player.

    ``player_id`` is used verbatim; an empty string is a valid query value.

    Raises:
        StoreError: If the query fails
        pydantic.ValidationError: If any stored item is malformed
    """
    logger.info('Fetching shots for player', extra={'player_id': player_id})
    items = dal.query_by_player(player_id)
    shots = shots_from_items(items)
    logger.info('Fetched player shots', extra={'player_id': player_id, 'shot_count': len(shots)})
    return shots


def add_shot(dal: ShotsStore, body: str, store_all_fields: bool = False) -> Shot:
    """
    Decode a request body and store the shot.

    Only ``id``, ``player_id`` and ``player`` are persisted unless
    ``store_all_fields`` is set.

    Args:
        dal: Shot store
        body: Raw request body
        store_all_fields: Persist every decoded attribute

    Returns:
        The decoded shot

    Raises:
        pydantic.ValidationError: If the body is not a shot record; nothing is written
        StoreError: If the write fails
    """
    shot = Shot.from_request_body(body)
    item = shot.to_full_item() if store_all_fields else shot.to_key_item()
    dal.put_item(item)
    logger.info('Shot stored', extra={'shot_id': shot.id, 'player_id': shot.player_id, 'attribute_count': len(item)})
    return shot
