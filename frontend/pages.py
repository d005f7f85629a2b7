from abc import ABC, abstractmethod
from typing import Callable, Optional

from backend.schemas import Card, Hand
from frontend.fetcher import Fetcher
from frontend.load_state import Loaded, Resource
from frontend.result import Ok
from frontend.views import (
    ViewNode,
    h,
    render_card,
    render_error,
    render_hand,
    render_heading,
    render_link,
    render_message,
)


NO_RESPONSE = "No server response"


class Page(ABC):
    """
    A mounted page. Pages that need remote data own one Resource;
    render() maps its current state to a view.
    """

    resource: Optional[Resource] = None

    def mount(self) -> None:
        if self.resource is not None:
            self.resource.mount()

    def unmount(self) -> None:
        if self.resource is not None:
            self.resource.unmount()

    async def settle(self) -> None:
        """
        Waits until the pending fetch, if any, has landed.
        """

        if self.resource is not None:
            await self.resource.wait()

    @abstractmethod
    def render(self) -> ViewNode:
        ...


class HomePage(Page):
    def render(self) -> ViewNode:
        return h("div", render_heading("Hello Frontend"), render_link("/cards", "See the cards"))


class NotFoundPage(Page):
    def render(self) -> ViewNode:
        return render_heading("404: Not Found")


class HelloServerPage(Page):
    def __init__(self, fetcher: Fetcher, on_change: Optional[Callable[[], None]] = None):
        self.resource = Resource(lambda: fetcher.fetch_text("/api/hello"), on_change)

    def render(self) -> ViewNode:
        state = self.resource.state
        if not isinstance(state, Loaded):
            return render_message(NO_RESPONSE)
        if isinstance(state.result, Ok):
            return render_message(state.result.value)
        return render_error(state.result.message)


class CardPage(Page):
    def __init__(self, fetcher: Fetcher, card_id: int,
                 on_change: Optional[Callable[[], None]] = None):
        self.card_id = card_id
        self.resource = Resource(
            lambda: fetcher.fetch_json(f"/api/card/{card_id}", Card), on_change)

    def render(self) -> ViewNode:
        state = self.resource.state
        if not isinstance(state, Loaded):
            return render_card(Card.placeholder())
        if isinstance(state.result, Ok):
            return render_card(state.result.value)
        return render_error(state.result.message)


class CardListPage(Page):
    def __init__(self, fetcher: Fetcher, on_change: Optional[Callable[[], None]] = None):
        self.resource = Resource(lambda: fetcher.fetch_json("/api/cards", Hand), on_change)

    def render(self) -> ViewNode:
        state = self.resource.state
        if not isinstance(state, Loaded):
            return render_message(NO_RESPONSE)
        if isinstance(state.result, Ok):
            return h("div", render_heading("Cards"), render_hand(state.result.value))
        return render_error(state.result.message)
