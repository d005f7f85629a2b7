"""
Tests for frontend/views.py and page rendering.
"""

import pytest

from backend import mock_data
from backend.schemas import Card, Hand
from frontend.constants import CARD_EM_WIDTH
from frontend.load_state import Loaded
from frontend.pages import CardListPage, CardPage, HelloServerPage, HomePage, NotFoundPage, Page
from frontend.result import Err, Ok
from frontend.views import (
    h,
    hand_layout,
    render_card,
    render_error,
    render_hand,
    render_message,
    to_html,
)


def _classes(node):
    return set(node.classes)


class TestRenderCard:
    def test_is_deterministic(self):
        card = Card(id=4, name="Card 4", description="Description 4")
        same = Card(id=4, name="Card 4", description="Description 4")
        assert render_card(card) == render_card(same)
        assert to_html(render_card(card)) == to_html(render_card(same))

    def test_shows_id_name_description(self):
        html = to_html(render_card(Card(id=4, name="Card 4", description="Description 4")))
        assert "Card 4" in html
        assert "Description 4" in html
        assert "#4" in html

    def test_description_scrolls(self):
        description = render_card(mock_data.card(1)).children[1]
        assert ("overflow-y", "scroll") in description.style

    def test_width_uses_shared_constant(self):
        node = render_card(Card.placeholder())
        assert ("width", f"{CARD_EM_WIDTH:g}em") in node.style

    def test_placeholder_is_marked(self):
        assert "card-placeholder" in _classes(render_card(Card.placeholder()))
        assert "card-placeholder" not in _classes(render_card(mock_data.card(1)))

    def test_text_is_escaped(self):
        html = to_html(render_card(Card(id=1, name="<b>x</b>", description="a & b")))
        assert "<b>x</b>" not in html
        assert "&lt;b&gt;x&lt;/b&gt;" in html
        assert "a &amp; b" in html


class TestRenderHand:
    def test_keeps_card_order(self):
        hand = mock_data.card_list()
        items = render_hand(hand).children[0].children
        ids = [item.children[0].attrs for item in items]
        assert ids == [(("data-card-id", str(card.id)),) for card in hand.cards]

    def test_empty_hand(self):
        assert render_hand(Hand()).children[0].children == ()

    def test_is_deterministic(self):
        assert render_hand(mock_data.card_list()) == render_hand(mock_data.card_list())

    def test_offset_is_half_a_card(self):
        row = render_hand(Hand()).children[0]
        assert ("transform", f"translateX(-{CARD_EM_WIDTH / 2:g}em)") in row.style


class TestHandLayout:
    def test_follows_card_width(self):
        layout = hand_layout(20.0)
        assert layout.offset_em == 10.0
        assert layout.max_width_em == 2 * hand_layout().max_width_em
        assert layout.transform == "translateX(-10em)"

    def test_default_hover(self):
        layout = hand_layout()
        assert layout.hover_transform == "translateX(-5em) translateY(2em)"
        assert layout.card_hover_transform == "translateY(-15em)"


class TestToHtml:
    def test_attributes_are_escaped(self):
        html = to_html(h("a", text="x", attrs={"href": '/"><script>'}))
        assert "<script>" not in html

    def test_void_tag(self):
        assert to_html(h("br")) == "<br>"

    def test_nested(self):
        assert to_html(h("div", h("span", text="a"), classes=("x",))) == \
            '<div class="x"><span>a</span></div>'


class TestPageStates:
    """Loading, error and success must look different."""

    def test_card_page_states_differ(self):
        page = CardPage(None, 3)
        loading = page.render()
        page.resource.state = Loaded(Err("Error fetching data: 500 (Internal Server Error)"))
        error = page.render()
        page.resource.state = Loaded(Ok(mock_data.card(3)))
        success = page.render()

        assert "card-placeholder" in _classes(loading)
        assert "error" in _classes(error)
        assert "card" in _classes(success) and "card-placeholder" not in _classes(success)
        assert len({loading, error, success}) == 3

    def test_card_list_states(self):
        page = CardListPage(None)
        assert page.render() == render_message("No server response")
        page.resource.state = Loaded(Err("Error: refused"))
        assert page.render() == render_error("Error: refused")
        page.resource.state = Loaded(Ok(mock_data.card_list()))
        assert "Cards" in to_html(page.render())

    def test_hello_page_states(self):
        page = HelloServerPage(None)
        assert page.render() == render_message("No server response")
        page.resource.state = Loaded(Ok("hello from server!"))
        assert page.render() == render_message("hello from server!")

    def test_static_pages(self):
        assert "See the cards" in to_html(HomePage().render())
        assert 'href="/cards"' in to_html(HomePage().render())
        assert "404: Not Found" in to_html(NotFoundPage().render())

    def test_page_without_render_cannot_be_built(self):
        class Blank(Page):
            pass

        with pytest.raises(TypeError):
            Blank()

    def test_static_pages_have_no_resource(self):
        page = HomePage()
        page.mount()
        page.unmount()
        assert page.resource is None
