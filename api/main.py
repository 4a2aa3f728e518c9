import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes.career_data import router as career_data_router
from api.routes.career_questions import router as career_questions_router
from api.routes.conversations import router as conversations_router
from api.routes.realtime import router as realtime_router
from api.routes.recommendations import router as recommendations_router
from api.routes.swot_analysis import router as swot_analysis_router
from api.routes.users import router as users_router
from config.settings import settings
from repositories import build_store
from repositories.store import CareerStore
from services import ConnectionNotifier
from utils.errors import CareerAgentsError
from utils.llm_service import LLMService
from utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

DESCRIPTION = """
Backend for the career decision dashboard. Three agents look at a career question from different angles.

## Quick Start

1. **Ask a question** → `POST /api/career-questions` with the question and optional roles
2. **Run Vazir** → `POST /api/swot-analysis/{questionId}` for a SWOT analysis
3. **Read the debate** → `GET /api/conversations/{questionId}/vazir` for the quadrant-by-quadrant transcript

## Agents

| Agent | Endpoint | Status |
|-------|----------|--------|
| `vazir` | `/api/swot-analysis` | SWOT analysis with a multi-turn LLM conversation |
| `gawi` | `/api/career-data` | Placeholder (market data coming soon) |
| `zaki` | `/api/recommendations` | Placeholder (weighted recommendations coming soon) |

## Realtime

Connect to `/ws` and send `{"type": "subscribe", "questionId": "..."}` to receive
`analysis_started` and `conversation_progress` events for that question.

## Errors

Every error response has the shape `{"error": "message"}`.
"""

tags_metadata = [
    {
        "name": "Health",
        "description": "Health check endpoints.",
    },
    {
        "name": "Career Questions",
        "description": "Submit and fetch career questions. Every agent result is keyed by question id.",
    },
    {
        "name": "SWOT Analysis",
        "description": "Vazir agent. Generates a SWOT analysis, then walks the four quadrants in an LLM conversation.",
    },
    {
        "name": "Conversations",
        "description": "Agent conversation transcripts.",
    },
    {
        "name": "Career Data",
        "description": "Gawi agent. Placeholder market data.",
    },
    {
        "name": "Recommendations",
        "description": "Zaki agent. Placeholder weighted recommendations.",
    },
    {
        "name": "Users",
        "description": "Optional question owners. No authentication.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    if not settings.provider_api_key():
        logger.warning(
            f"No API key configured for LLM provider '{settings.LLM_PROVIDER}'; "
            f"SWOT analysis calls will fail upstream"
        )
    yield
    app.state.store.close()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map every failure onto the {"error": message} body."""

    @app.exception_handler(CareerAgentsError)
    async def career_agents_error_handler(request: Request, exc: CareerAgentsError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        return _error(400, f"Invalid request: {details}")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"{request.method} {request.url.path} failed")
        return _error(500, str(exc) or "Internal server error")


def create_app(
    store: Optional[CareerStore] = None,
    llm_service: Optional[LLMService] = None,
    notifier: Optional[ConnectionNotifier] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        store: Store backend; defaults to build_store() from settings
        llm_service: LLM wrapper; built on first SWOT request when omitted
        notifier: WebSocket notifier shared by routes and services

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Career Agents API",
        description=DESCRIPTION,
        version="1.0.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    app.state.store = store if store is not None else build_store()
    app.state.llm_service = llm_service
    app.state.notifier = notifier or ConnectionNotifier()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/", tags=["Root"])
    def root():
        """Root endpoint with API information and documentation links"""
        return {
            "message": "Welcome to Career Agents API",
            "version": "1.0.0",
            "documentation": {
                "swagger": "/docs",
                "redoc": "/redoc"
            },
            "endpoints": {
                "health": "/health",
                "ping": "/ping",
                "career_questions": "/api/career-questions",
                "swot_analysis": "/api/swot-analysis",
                "conversations": "/api/conversations",
                "career_data": "/api/career-data",
                "recommendations": "/api/recommendations",
                "users": "/api/users",
                "websocket": "/ws"
            }
        }

    @app.get("/ping", tags=["Health"])
    def ping():
        """Simple ping endpoint to check if API is responding."""
        return {"message": "pong"}

    @app.get("/health", tags=["Health"])
    def health():
        """Health check endpoint with basic status information."""
        return {
            "status": "healthy",
            "service": "Career Agents API",
            "version": "1.0.0",
            "store": settings.STORE_BACKEND,
            "llmProvider": settings.LLM_PROVIDER,
        }

    # Register routers
    app.include_router(career_questions_router)
    app.include_router(swot_analysis_router)
    app.include_router(conversations_router)
    app.include_router(career_data_router)
    app.include_router(recommendations_router)
    app.include_router(users_router)
    app.include_router(realtime_router)

    return app


app = create_app()
