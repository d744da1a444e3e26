"""FastAPI application exposing the player API."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tierboard.config import get_settings
from tierboard.context import AppContext, create_context
from tierboard.db.session import create_tables
from tierboard.server.handlers import INTERNAL_ERROR, ApiResponse, PlayerHandler
from tierboard.server.schemas import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    PlayerPayload,
    PlayerRow,
    PlayerSaved,
    error_body,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

API_PREFIX = "/api"

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _to_json(response: ApiResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.body)


def get_handler(request: Request) -> PlayerHandler:
    """Build a handler bound to the running app's context."""
    return PlayerHandler(request.app.state.ctx)


router = APIRouter()


@router.post(
    "/players",
    status_code=201,
    response_model=PlayerSaved,
    responses=ERROR_RESPONSES,
)
def create_player(payload: PlayerPayload, request: Request):
    """Add a player; points and title are computed from the tiers."""
    return _to_json(get_handler(request).handle_create(payload))


@router.get("/players", response_model=list[PlayerRow], responses={500: {"model": ErrorResponse}})
def list_players(request: Request):
    """List every player, newest first."""
    return _to_json(get_handler(request).handle_list())


@router.put("/players/{player_id}", response_model=PlayerSaved, responses=ERROR_RESPONSES)
def update_player(player_id: str, payload: PlayerPayload, request: Request):
    """Replace a player's fields and recompute points and title."""
    return _to_json(get_handler(request).handle_update(player_id, payload))


@router.delete("/players/{player_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def delete_player(player_id: str, request: Request):
    """Delete a player."""
    return _to_json(get_handler(request).handle_delete(player_id))


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    timestamp = datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return {"status": "ok", "timestamp": timestamp}


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies with the API's error shape."""
    logger.info(f"Invalid request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content=error_body("Invalid request body"))


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log anything unhandled and hide the cause from the caller."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content=error_body(INTERNAL_ERROR))


def create_app(ctx: AppContext | None = None) -> FastAPI:
    """Create the API application.

    A context passed in is used as-is (tests pass one bound to an in-memory
    database); otherwise one is built from settings at startup.
    """
    settings = ctx.settings if ctx is not None else get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        # Startup - create context
        if app.state.ctx is None:
            app.state.ctx = create_context()
        context: AppContext = app.state.ctx

        logging.getLogger().setLevel(context.settings.log_level.upper())
        logger.info(f"Tierboard server starting on {context.settings.host}:{context.settings.port}")
        logger.info(f"Database: {context.engine.url.render_as_string(hide_password=True)}")

        create_tables(context.engine)
        logger.info("Database initialized")

        yield

        # Shutdown
        context.engine.dispose()
        logger.info("Tierboard server shutting down")

    app = FastAPI(
        title="Tierboard Backend",
        description="REST API for the combat tier leaderboard",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.ctx = ctx

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, invalid_body_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
    app.include_router(router, prefix=API_PREFIX)

    return app


app = create_app()
