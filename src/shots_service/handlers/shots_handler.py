"""
Shots Handler - Lambda function for the shots REST API.

Routes API Gateway proxy events on their (method, resource template) pair to
one of three operations and maps every outcome to a JSON proxy response.
Store and input failures are fully handled here and never propagate to the
Lambda runtime.
"""

import base64
import binascii
from typing import Any, Callable, Dict, Optional, Tuple

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from shots_service.dal import ShotsStore, StoreError, get_dal_handler
from shots_service.handlers.models.env_vars import get_handler_env_vars
from shots_service.handlers.utils.observability import logger, metrics, tracer, traced_operation
from shots_service.handlers.utils.responses import client_error, json_response, not_found, server_error
from shots_service.logic.shot_service import add_shot, list_all_shots, list_player_shots

SHOTS_RESOURCE = '/shots'
PLAYER_SHOTS_RESOURCE = '/shots/{player_id}'


@traced_operation('GetAllShots')
def get_all_shots(dal: ShotsStore) -> Dict[str, Any]:
    """Return every stored shot as a JSON array."""
    try:
        shots = list_all_shots(dal)
    except StoreError as exc:
        logger.exception('DynamoDB Scan error', extra={'error': str(exc)})
        metrics.add_metric(name='StoreFailure', unit=MetricUnit.Count, value=1)
        return server_error('Failed to fetch data')
    except ValidationError as exc:
        logger.error('Unmarshal error', extra={'error_count': exc.error_count()})
        metrics.add_metric(name='StoreFailure', unit=MetricUnit.Count, value=1)
        return server_error('Failed to unmarshal data')

    metrics.add_metric(name='ShotsReturned', unit=MetricUnit.Count, value=len(shots))
    return json_response(200, [shot.model_dump() for shot in shots])


@traced_operation('GetShotsByPlayer')
def get_shots_by_player(dal: ShotsStore, player_id: str) -> Dict[str, Any]:
    """Return the shots of one player as a JSON array."""
    try:
        shots = list_player_shots(dal, player_id)
    except StoreError as exc:
        logger.exception('Query error', extra={'error': str(exc), 'player_id': player_id})
        metrics.add_metric(name='StoreFailure', unit=MetricUnit.Count, value=1)
        return server_error('Failed to query shots')
    except ValidationError as exc:
        logger.error('Unmarshal error', extra={'error_count': exc.error_count(), 'player_id': player_id})
        metrics.add_metric(name='StoreFailure', unit=MetricUnit.Count, value=1)
        return server_error('Failed to process response')

    metrics.add_metric(name='ShotsReturned', unit=MetricUnit.Count, value=len(shots))
    return json_response(200, [shot.model_dump() for shot in shots])


@traced_operation('PostShot')
def post_shot(dal: ShotsStore, body: Optional[str], is_base64_encoded: bool = False) -> Dict[str, Any]:
    """Store the shot carried by the request body."""
    logger.info('Processing POST request')

    # configuration errors are deployment faults, not client errors
    store_all_fields = get_handler_env_vars().store_all_shot_fields

    if is_base64_encoded and body:
        try:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as exc:
            logger.info('Request body is not valid base64 text', extra={'error': str(exc)})
            metrics.add_metric(name='InvalidShotInput', unit=MetricUnit.Count, value=1)
            return client_error('Invalid input data')

    try:
        add_shot(dal, body or '', store_all_fields=store_all_fields)
    except ValidationError as exc:
        logger.info('Unmarshal error', extra={'error_count': exc.error_count()})
        metrics.add_metric(name='InvalidShotInput', unit=MetricUnit.Count, value=1)
        return client_error('Invalid input data')
    except StoreError as exc:
        logger.exception('PutItem error', extra={'error': str(exc)})
        metrics.add_metric(name='StoreFailure', unit=MetricUnit.Count, value=1)
        return server_error('Failed to add shot')

    metrics.add_metric(name='ShotAdded', unit=MetricUnit.Count, value=1)
    return json_response(200, {'message': 'Shot added successfully'})


def _route_all_shots(event: Dict[str, Any], dal: ShotsStore) -> Dict[str, Any]:
    return get_all_shots(dal)


def _route_player_shots(event: Dict[str, Any], dal: ShotsStore) -> Dict[str, Any]:
    path_parameters = event.get('pathParameters') or {}
    return get_shots_by_player(dal, path_parameters.get('player_id', ''))


def _route_post_shot(event: Dict[str, Any], dal: ShotsStore) -> Dict[str, Any]:
    return post_shot(dal, event.get('body'), bool(event.get('isBase64Encoded')))


ROUTES: Dict[Tuple[str, str], Callable[[Dict[str, Any], ShotsStore], Dict[str, Any]]] = {
    ('GET', SHOTS_RESOURCE): _route_all_shots,
    ('GET', PLAYER_SHOTS_RESOURCE): _route_player_shots,
    ('POST', SHOTS_RESOURCE): _route_post_shot,
}


@traced_operation('LambdaHandler')
def dispatch(event: Dict[str, Any], dal: Optional[ShotsStore] = None) -> Dict[str, Any]:
    """
    Route one API Gateway proxy event.

    Matching is an exact comparison of the HTTP method and the resource
    template (``event['resource']``), never of the concrete path.

    Args:
        event: API Gateway REST proxy event
        dal: Shot store; the process-wide store is used when omitted

    Returns:
        API Gateway proxy response
    """
    http_method = event.get('httpMethod')
    resource = event.get('resource')
    logger.info('Received request', extra={'http_method': http_method, 'resource': resource})

    route = ROUTES.get((http_method, resource))
    if route is None:
        logger.info('Invalid request received', extra={'http_method': http_method, 'resource': resource})
        metrics.add_metric(name='RouteNotFound', unit=MetricUnit.Count, value=1)
        return not_found()

    return route(event, dal if dal is not None else get_dal_handler())


@tracer.capture_lambda_handler(capture_response=False)
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Shots Lambda function handler.

    Args:
        event: API Gateway REST proxy event
        context: Lambda context object

    Returns:
        API Gateway proxy response
    """
    return dispatch(event)
