import re
import logging
from contextlib import asynccontextmanager
from typing import Optional

import anyio
import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.staticfiles import StaticFiles

from backend import mock_data
from backend.config import Settings, configure_logging, load_settings


logger = logging.getLogger(__name__)

HELLO_MESSAGE = "hello from server!"
INDEX_FILE = "index.html"

CARD_ID_PATTERN = re.compile(r"-?\d+")
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def parse_card_id(raw: str) -> Optional[int]:
    """
    Parses the :id path segment of /api/card/:id.
    Only plain decimal integers that fit in 32 bits are accepted,
    everything else gives None.
    """

    if not CARD_ID_PATTERN.fullmatch(raw):
        return None

    value = int(raw)
    if not INT32_MIN <= value <= INT32_MAX:
        return None

    return value


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Builds the API application.
    The routes are registered in priority order, the catch-all
    static route with the SPA fallback goes last.
    """

    settings = settings or load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Serving static files from %s", settings.static_dir)
        yield
        logger.info("Stopping API...")

    app = FastAPI(title="Card Table API", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "HEAD"],
        allow_headers=["*"],
    )

    static_files = StaticFiles(directory=settings.static_dir, check_dir=False)

    @app.api_route("/api/hello", methods=["GET", "HEAD"], response_class=PlainTextResponse)
    async def hello() -> str:
        return HELLO_MESSAGE

    @app.api_route("/api/cards", methods=["GET", "HEAD"])
    async def get_cards() -> JSONResponse:
        return JSONResponse(content=mock_data.card_list().model_dump(mode="json"))

    @app.api_route("/api/card/{card_id}", methods=["GET", "HEAD"])
    async def get_card(card_id: str) -> Response:
        parsed_id = parse_card_id(card_id)
        if parsed_id is None:
            logger.debug("Rejected card id %r", card_id)
            return PlainTextResponse(f"invalid card id: {card_id}", status_code=400)

        return JSONResponse(content=mock_data.card(parsed_id).model_dump(mode="json"))

    @app.api_route("/{full_path:path}", methods=["GET", "HEAD"])
    async def static_or_index(full_path: str, request: Request) -> Response:
        """
        Serves a file from the static directory.
        When no file matches, returns index.html so the client router
        can render the page.
        """

        try:
            path = static_files.get_path(request.scope)
            return await static_files.get_response(path, request.scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                return PlainTextResponse(str(exc.detail), status_code=exc.status_code)
        except Exception as e:
            logger.error("Unable to serve static files: %s", e)
            return PlainTextResponse(f"error: {e}", status_code=500)

        return await read_index(settings.static_dir)

    return app


async def read_index(static_dir: str) -> Response:
    index_path = anyio.Path(static_dir) / INDEX_FILE
    try:
        content = await index_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Unable to read index.html: %s", e)
        return PlainTextResponse("index not found", status_code=500)

    return HTMLResponse(content, status_code=200)


if __name__ == "__main__":
    settings = load_settings()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.addr, port=settings.port,
                log_level=settings.log_level)
