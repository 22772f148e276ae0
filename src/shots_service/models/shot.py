"""
Shot domain model.

This module defines the Shot record exchanged with API clients and stored in
DynamoDB, together with the decoding rules for request bodies and stored items.
"""

from decimal import Decimal
from typing import Annotated, Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class Shot(BaseModel):
    """A single basketball shot attempt."""

    model_config = ConfigDict(extra='ignore', allow_inf_nan=False)

    id: Annotated[str, Field(
        description='Caller-supplied unique identifier of the shot',
        examples=['0022300061_12']
    )] = ''

    player_id: Annotated[str, Field(
        description='Identifier of the shooting player, partition key of the player index',
        examples=['201939']
    )] = ''

    player: Annotated[str, Field(
        description='Display name of the shooting player',
        examples=['Stephen Curry']
    )] = ''

    team: Annotated[str, Field(
        description='Team of the shooting player',
        examples=['Golden State Warriors']
    )] = ''

    game_date: Annotated[str, Field(
        description='Date of the game',
        examples=['2023-10-24']
    )] = ''

    quarter: Annotated[int, Field(
        description='Quarter in which the shot was taken',
        examples=[4]
    )] = 0

    time_left: Annotated[str, Field(
        description='Time left in the quarter',
        examples=['01:32']
    )] = ''

    x: Annotated[float, Field(
        description='Court x coordinate',
        examples=[-22.5]
    )] = 0.0

    y: Annotated[float, Field(
        description='Court y coordinate',
        examples=[8.1]
    )] = 0.0

    shot_type: Annotated[str, Field(
        description='Shot type',
        examples=['3PT Field Goal']
    )] = ''

    outcome: Annotated[str, Field(
        description='Outcome of the attempt',
        examples=['made', 'missed']
    )] = ''

    action_type: Annotated[str, Field(
        description='Play action leading to the shot',
        examples=['Pullup Jump Shot']
    )] = ''

    basic_zone: Annotated[str, Field(
        description='Court zone of the shot',
        examples=['Above the Break 3']
    )] = ''

    shots_made: Annotated[int, Field(
        description='Made shots counter',
        ge=-(2**63),
        lt=2**63,
        examples=[1]
    )] = 0

    @field_validator('*', mode='before')
    @classmethod
    def null_as_zero_value(cls, value: Any, info: ValidationInfo) -> Any:
        """Treat an explicit null like an absent attribute."""
        if value is None:
            return cls.model_fields[info.field_name].get_default()
        return value

    @field_validator('quarter', 'shots_made', mode='before')
    @classmethod
    def integral_decimal_as_int(cls, value: Any) -> Any:
        # DynamoDB numbers arrive as Decimal; fractional values stay Decimal and fail
        if isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
            return int(value)
        return value

    @field_validator('x', 'y', mode='before')
    @classmethod
    def decimal_as_float(cls, value: Any) -> Any:
        if isinstance(value, Decimal):
            return float(value)
        return value

    @classmethod
    def from_request_body(cls, body: str) -> 'Shot':
        """
        Decode an API request body into a Shot.

        The body must be a JSON object whose values have the JSON types of the
        matching fields; absent fields keep their zero value.

        Raises:
            pydantic.ValidationError: If the body is not valid JSON or has the wrong shape
        """
        return cls.model_validate_json(body, strict=True)

    def to_key_item(self) -> Dict[str, Any]:
        """Build the DynamoDB item holding only the identifying attributes."""
        return {
            'id': self.id,
            'player_id': self.player_id,
            'player': self.player,
        }

    def to_full_item(self) -> Dict[str, Any]:
        """Build the DynamoDB item holding every attribute; floats become Decimal."""
        item = self.model_dump()
        item['x'] = Decimal(str(self.x))
        item['y'] = Decimal(str(self.y))
        return item


def shots_from_items(items: List[Dict[str, Any]]) -> List[Shot]:
    """
    Decode raw DynamoDB items into Shots.

    Decoding is strict and all-or-nothing: a single malformed item fails the
    whole batch. Numbers must be stored as numbers and strings as strings.

    Raises:
        pydantic.ValidationError: If any item does not match the Shot shape
    """
    return [Shot.model_validate(item, strict=True) for item in items]
