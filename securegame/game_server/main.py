"""Secure Game Service - FastAPI application."""

import logging
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Path, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from securegame.game_server.auth import verify_api_key
from securegame.game_server.config import Settings, get_settings
from securegame.game_server.errors import GameNotFoundError, InvalidTransitionError
from securegame.game_server.game_logic import GameSnapshot, Player
from securegame.game_server.models import (
    AddPlayerRequest,
    ErrorResponse,
    GameResponse,
    PlayerResponse,
    SecureDataResponse,
    StoreSecureDataRequest,
)
from securegame.game_server.store import GameRegistry

logger = logging.getLogger(__name__)

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Game not found"}}
UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Invalid API key"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Not allowed in the game's current state"}}


def get_registry(request: Request) -> GameRegistry:
    return request.app.state.registry


Registry = Annotated[GameRegistry, Depends(get_registry)]
ApiKey = Annotated[str, Depends(verify_api_key)]
GameId = Annotated[int, Path(description="Game ID")]


def game_response(game: GameSnapshot) -> GameResponse:
    return GameResponse(
        game_id=game.game_id,
        state=game.state,
        created_at=game.created_at,
        players=[PlayerResponse(player_id=p.player_id, username=p.username) for p in game.players],
    )


def _not_found(e: GameNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _conflict(e: InvalidTransitionError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


def create_app(registry: GameRegistry | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the API around a registry.

    Args:
        registry: Registry to serve; a fresh one is created if omitted
        settings: Service settings; read from the environment if omitted

    Returns:
        The configured FastAPI application
    """
    settings = settings if settings is not None else get_settings()

    app = FastAPI(
        title="Secure Game Service",
        description="In-memory game session tracking and hashed-key data storage",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.registry = registry if registry is not None else GameRegistry()
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", tags=["Health"])
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "Secure Game Service"}

    @app.post(
        "/api/games",
        response_model=GameResponse,
        status_code=status.HTTP_201_CREATED,
        responses={**UNAUTHORIZED},
        tags=["Game Management"],
    )
    async def create_game(registry: Registry, _api_key: ApiKey) -> GameResponse:
        """
        Create a new game.

        The game gets the next free ID and starts in 'not_started' state with
        no players.
        """
        game = registry.create_game()
        return game_response(registry.describe_game(game.game_id))

    @app.get("/api/games", response_model=list[int], responses={**UNAUTHORIZED}, tags=["Game Management"])
    async def list_games(registry: Registry, _api_key: ApiKey) -> list[int]:
        """List all game IDs in creation order."""
        return registry.list_games()

    @app.get(
        "/api/games/{game_id}",
        response_model=GameResponse,
        responses={**UNAUTHORIZED, **NOT_FOUND},
        tags=["Game State"],
    )
    async def get_game(game_id: GameId, registry: Registry, _api_key: ApiKey) -> GameResponse:
        """Get a game's state and roster."""
        try:
            return game_response(registry.describe_game(game_id))
        except GameNotFoundError as e:
            raise _not_found(e) from e

    @app.post(
        "/api/games/{game_id}/players",
        response_model=GameResponse,
        responses={**UNAUTHORIZED, **NOT_FOUND, **CONFLICT},
        tags=["Game Management"],
    )
    async def add_player(
        game_id: GameId, request: AddPlayerRequest, registry: Registry, _api_key: ApiKey
    ) -> GameResponse:
        """
        Add a player to a game.

        Players can only join before the game starts.
        """
        player = Player(player_id=request.player_id, username=request.username, credential=request.credential)
        try:
            return game_response(registry.add_player_to_game(game_id, player))
        except GameNotFoundError as e:
            raise _not_found(e) from e
        except InvalidTransitionError as e:
            raise _conflict(e) from e

    @app.post(
        "/api/games/{game_id}/start",
        response_model=GameResponse,
        responses={**UNAUTHORIZED, **NOT_FOUND, **CONFLICT},
        tags=["Game Actions"],
    )
    async def start_game(game_id: GameId, registry: Registry, _api_key: ApiKey) -> GameResponse:
        """Start a game. Starting a game already in progress has no effect."""
        try:
            return game_response(registry.start_game(game_id))
        except GameNotFoundError as e:
            raise _not_found(e) from e
        except InvalidTransitionError as e:
            raise _conflict(e) from e

    @app.post(
        "/api/games/{game_id}/finish",
        response_model=GameResponse,
        responses={**UNAUTHORIZED, **NOT_FOUND, **CONFLICT},
        tags=["Game Actions"],
    )
    async def finish_game(game_id: GameId, registry: Registry, _api_key: ApiKey) -> GameResponse:
        """Finish a game in progress."""
        try:
            return game_response(registry.finish_game(game_id))
        except GameNotFoundError as e:
            raise _not_found(e) from e
        except InvalidTransitionError as e:
            raise _conflict(e) from e

    @app.put(
        "/api/secure-data/{key:path}",
        status_code=status.HTTP_204_NO_CONTENT,
        responses={**UNAUTHORIZED},
        tags=["Secure Data"],
    )
    async def store_secure_data(
        key: Annotated[str, Path(description="Lookup key (stored only as its digest)")],
        request: StoreSecureDataRequest,
        registry: Registry,
        _api_key: ApiKey,
    ) -> Response:
        """Store a value under a key, replacing any previous value."""
        registry.store_secure_data(key, request.value)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.get(
        "/api/secure-data/{key:path}",
        response_model=SecureDataResponse,
        responses={**UNAUTHORIZED, 404: {"model": ErrorResponse, "description": "No data stored for key"}},
        tags=["Secure Data"],
    )
    async def retrieve_secure_data(
        key: Annotated[str, Path(description="Lookup key")],
        registry: Registry,
        _api_key: ApiKey,
    ) -> SecureDataResponse:
        """Retrieve the value stored under a key."""
        value = registry.retrieve_secure_data(key)
        if value is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No data stored for key")
        return SecureDataResponse(value=value)

    logger.debug("Application created with %d existing games", len(app.state.registry.list_games()))
    return app


app = create_app()
