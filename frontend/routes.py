import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

from frontend.fetcher import Fetcher
from frontend.pages import (
    CardListPage,
    CardPage,
    HelloServerPage,
    HomePage,
    NotFoundPage,
    Page,
)


@dataclass(frozen=True)
class Home:
    pass


@dataclass(frozen=True)
class HelloServer:
    pass


@dataclass(frozen=True)
class CardRoute:
    id: int


@dataclass(frozen=True)
class Cards:
    pass


@dataclass(frozen=True)
class NotFound:
    pass


Route = Union[Home, HelloServer, CardRoute, Cards, NotFound]

CARD_PATH = re.compile(r"/card/(?P<id>-?\d+)")
MIN_CARD_ID = -(2 ** 31)
MAX_CARD_ID = 2 ** 31 - 1


def parse_route(path: str) -> Route:
    """
    Matches a URL path against the route table.
    A card id that is not a 32-bit integer does not match, so the path is NotFound.
    """

    path = path.partition("?")[0].partition("#")[0]
    path = "/" + path.strip("/")

    if path == "/":
        return Home()
    if path == "/hello-server":
        return HelloServer()
    if path == "/cards":
        return Cards()

    match = CARD_PATH.fullmatch(path)
    if match and MIN_CARD_ID <= int(match.group("id")) <= MAX_CARD_ID:
        return CardRoute(id=int(match.group("id")))

    return NotFound()


def switch(route: Route, fetcher: Fetcher,
           on_change: Optional[Callable[[], None]] = None) -> Page:
    if isinstance(route, Home):
        return HomePage()
    if isinstance(route, HelloServer):
        return HelloServerPage(fetcher, on_change)
    if isinstance(route, CardRoute):
        return CardPage(fetcher, route.id, on_change)
    if isinstance(route, Cards):
        return CardListPage(fetcher, on_change)
    return NotFoundPage()
