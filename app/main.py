# app/main.py

import logging
import socket
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.common.deps import get_greeting_service
from app.core.config import Settings, settings
from app.core.logging import setup_logging
from app.routers import health, hello
from app.services.greeting_service import GreetingService

# Same name under `python -m app.main`
logger = logging.getLogger("app.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.debug("%s starting up", app.title)
    yield
    logger.debug("%s shutting down", app.title)


def create_app(config: Optional[Settings] = None) -> FastAPI:
    config = config or settings

    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        docs_url=config.DOCS_URL,
        openapi_url=config.OPENAPI_URL,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(hello.router)
    app.include_router(health.router)

    @app.get("/", response_class=PlainTextResponse, tags=["root"])
    async def root(service: GreetingService = Depends(get_greeting_service)):
        return service.introduce()

    return app


app = create_app()


def bind_socket(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def run(config: Optional[Settings] = None) -> None:
    """
    Bind the listening socket and serve the app on it.

    The startup line is logged only after the address is bound; a bind
    failure exits the process with status 1.
    """
    config = config or settings
    setup_logging(config.LOG_LEVEL)

    try:
        sock = bind_socket(config.HOST, config.PORT)
    except OSError as exc:
        logger.error("Failed to bind %s:%s: %s", config.HOST, config.PORT, exc)
        sys.exit(1)

    host, port = sock.getsockname()[:2]
    logger.info("Server running on %s:%s", host, port)

    server = uvicorn.Server(uvicorn.Config(create_app(config), log_level=config.LOG_LEVEL.lower()))
    try:
        server.run(sockets=[sock])
    except KeyboardInterrupt:
        # Ctrl-C; uvicorn has already shut down
        pass
    finally:
        sock.close()


if __name__ == "__main__":
    run()
