"""
Business Logic Layer Module.

Coordinates the shot record model with the data access layer. The handlers
call these functions and translate their outcomes into API responses.
"""

from shots_service.logic.shot_service import add_shot, list_all_shots, list_player_shots

__all__ = [
    "add_shot",
    "list_all_shots",
    "list_player_shots",
]
