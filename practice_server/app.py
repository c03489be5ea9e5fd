from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from loguru import logger

from practice_server.config import settings
from practice_server.routers import message


@asynccontextmanager
async def lifetime(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"Practice server starting on port {settings.PORT}")
    yield
    logger.info("Practice server shutting down")


app = FastAPI(title="Practice", lifespan=lifetime)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(message.router)


@app.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return "Welcome to Practice app!"
