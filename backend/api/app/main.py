import logging
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from app import config
from app.config import HOST, LOG_LEVEL, PORT, Settings
from app.db import Database
from app.errors import register_error_handlers
from app.routes import users

logger = logging.getLogger(__name__)

DOTENV_PATH = Path(__file__).resolve().parent.parent.parent.parent / ".env"
if DOTENV_PATH.exists():
    load_dotenv(DOTENV_PATH)

@asynccontextmanager
async def lifespan(app: FastAPI):
    db = Database(app.state.settings.DATABASE_PATH)
    try:
        await db.connect()
        await db.create_tables()
    except Exception:
        logger.critical("Could not initialise database at %s", db.path, exc_info=True)
        await db.disconnect()
        raise
    app.state.db = db
    try:
        yield
    finally:
        await db.disconnect()

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    app = FastAPI(
        title="Users API",
        version="1.0.0",
        description="CRUD service for the users resource",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings or config.settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app.state.settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(users.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app

def run():
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(), host=HOST, port=PORT)
