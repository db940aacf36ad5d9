"""Pydantic models for the secure game service API."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GameState(str, Enum):
    """Game lifecycle state."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class AddPlayerRequest(BaseModel):
    """Request to add a player to a game."""

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"player_id": 1, "username": "alice", "credential": "h1"}]}
    )

    player_id: int = Field(..., ge=0, description="Caller-assigned player identifier")
    username: str = Field(..., description="Display name")
    credential: str = Field(..., description="Credential already hashed by the caller")


class PlayerResponse(BaseModel):
    """A player as exposed by the API (credential omitted)."""

    player_id: int = Field(..., description="Player identifier")
    username: str = Field(..., description="Display name")


class GameResponse(BaseModel):
    """Current view of a game."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "game_id": 0,
                    "state": "in_progress",
                    "created_at": "2021-01-01T00:00:00Z",
                    "players": [{"player_id": 1, "username": "alice"}],
                }
            ]
        }
    )

    game_id: int = Field(..., description="Registry-assigned game identifier")
    state: GameState = Field(..., description="Current lifecycle state")
    created_at: datetime = Field(..., description="ISO 8601 timestamp of game creation")
    players: list[PlayerResponse] = Field(default_factory=list, description="Roster in join order")


class StoreSecureDataRequest(BaseModel):
    """Request to store a value under a key."""

    model_config = ConfigDict(json_schema_extra={"examples": [{"value": "secretvalue"}]})

    value: str = Field(..., description="Opaque value to store")


class SecureDataResponse(BaseModel):
    """Value retrieved from the secure data store."""

    value: str = Field(..., description="Stored value")


class ErrorResponse(BaseModel):
    """Generic error response."""

    model_config = ConfigDict(json_schema_extra={"examples": [{"detail": "Game 3 not found"}]})

    detail: str = Field(..., description="Error message")
