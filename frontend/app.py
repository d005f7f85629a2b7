"""
Frontend Application Server.

Plays the part of the browser app: picks the page for the requested
path, lets the page load its data from the backend API and returns
the rendered view inside the index.html shell.
"""

import os
import logging
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask, render_template

from frontend.constants import DEFAULT_API_BASE, DEFAULT_FRONTEND_PORT, PAGE_TITLE
from frontend.fetcher import Fetcher
from frontend.routes import NotFound, parse_route, switch
from frontend.views import to_html


logger = logging.getLogger(__name__)


def load_api_base() -> str:
    load_dotenv()
    return os.environ.get("CARDTABLE_API_BASE", DEFAULT_API_BASE)


def create_app(fetcher_factory: Optional[Callable[[], Fetcher]] = None) -> Flask:
    """
    Builds the Flask app.

    Args:
        fetcher_factory: returns the Fetcher used by one page render.
            Defaults to a Fetcher on CARDTABLE_API_BASE.

    Returns:
        Flask: the configured application.
    """

    # Flask looks for templates in the 'templates' folder next to this module.
    app = Flask(__name__)
    app.config["API_BASE"] = load_api_base()

    if fetcher_factory is None:
        def fetcher_factory() -> Fetcher:
            return Fetcher(app.config["API_BASE"])

    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    async def index(path: str):
        """
        Single Page Application entry point.

        Every path lands here; the client route table decides what to show.
        """

        route = parse_route(f"/{path}")
        fetcher = fetcher_factory()
        renders = []

        page = switch(route, fetcher, on_change=lambda: renders.append(page.render()))
        try:
            page.mount()
            await page.settle()
        finally:
            page.unmount()
            fetcher.close()

        logger.debug("Rendered %s (%d re-renders)", route, len(renders))
        status = 404 if isinstance(route, NotFound) else 200
        body = to_html(page.render())

        return render_template("index.html", title=PAGE_TITLE, body=body), status

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    load_dotenv()
    port = int(os.environ.get("CARDTABLE_FRONTEND_PORT", DEFAULT_FRONTEND_PORT))
    print(f"Running at http://127.0.0.1:{port}")
    create_app().run(debug=True, port=port, host="0.0.0.0")
