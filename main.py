import argparse
import logging
import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

import sys
from pathlib import Path

# Add project root to path for package imports
base_dir = Path(__file__).parent
sys.path.insert(0, str(base_dir))

from db.storage import MemoryStore
from config import load_config, CONFIG_PATH
from routes import users, elo, daily_goals, courses, goals, analyses, progress  # Import routers

logger = logging.getLogger("chesstrack")

# Validation messages keyed by the first path segment under /api
INVALID_DATA_MESSAGES = {
    "user": "Invalid user data",
    "elo": "Invalid ELO entry data",
    "elo-stats": "Invalid ELO stats request",
    "elo-performance": "Invalid ELO stats request",
    "daily-goals": "Invalid goal data",
    "goals": "Invalid goal data",
    "courses": "Invalid course data",
    "game-analyses": "Invalid analysis data",
}

def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: config, logging, and a fresh store for this process
    config = load_config()
    configure_logging(config["logging"]["level"])
    app.state.store = MemoryStore()
    logger.info("Store ready")
    yield
    # Shutdown: the store lives only as long as the process
    app.state.store = None

app = FastAPI(title="ChessTrack", description="Chess improvement tracker API", lifespan=lifespan)

# Include routers
app.include_router(users.router, prefix="/api", tags=["users"])
app.include_router(elo.router, prefix="/api", tags=["elo"])
app.include_router(daily_goals.router, prefix="/api", tags=["daily-goals"])
app.include_router(courses.router, prefix="/api", tags=["courses"])
app.include_router(goals.router, prefix="/api", tags=["goals"])
app.include_router(analyses.router, prefix="/api", tags=["analyses"])
app.include_router(progress.router, prefix="/api", tags=["progress"])

def invalid_data_message(request: Request) -> str:
    parts = request.url.path.strip("/").split("/")
    resource = parts[1] if len(parts) > 1 and parts[0] == "api" else ""
    return INVALID_DATA_MESSAGES.get(resource, "Invalid request data")

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": invalid_data_message(request), "errors": jsonable_encoder(exc.errors())},
    )

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="ChessTrack API")
    parser.add_argument("--init", action="store_true", help="Write the default config and exit")
    parser.add_argument("--dev", action="store_true", help="Run in dev mode with reload")
    args = parser.parse_args()
    config = load_config()  # Ensures config is copied if missing
    if args.init:
        print(f"Config written to {CONFIG_PATH}")
        sys.exit(0)
    # Run server
    uvicorn.run(
        "main:app",
        host=config["server"]["host"],
        port=config["server"]["port"],
        reload=args.dev,
        log_level=config["logging"]["level"].lower(),
    )
