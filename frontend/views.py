"""
View tree and renderers.

Renderers are pure: they take entities and return ViewNode trees,
never touch the network. to_html turns a tree into markup.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from markupsafe import Markup, escape

from backend.schemas import Card, Hand
from frontend.constants import (
    CARD_EM_HEIGHT,
    CARD_EM_WIDTH,
    HAND_HOVER_LIFT_EM,
    HAND_HOVER_MAX_WIDTH_EM,
    HAND_MAX_WIDTH_EM,
)


VOID_TAGS = {"br", "hr", "img", "input", "meta", "link"}


@dataclass(frozen=True)
class ViewNode:
    tag: str
    text: str = ""
    classes: Tuple[str, ...] = ()
    style: Tuple[Tuple[str, str], ...] = ()
    attrs: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["ViewNode", ...] = field(default_factory=tuple)


def h(tag: str, *children: ViewNode, text: str = "", classes=(),
      style: Dict[str, str] | None = None,
      attrs: Dict[str, str] | None = None) -> ViewNode:
    """
    Shorthand for building a node. Dicts are frozen into sorted tuples,
    so equal inputs always give equal nodes.
    """

    return ViewNode(
        tag=tag,
        text=text,
        classes=tuple(classes),
        style=tuple(sorted((style or {}).items())),
        attrs=tuple(sorted((attrs or {}).items())),
        children=tuple(children),
    )


def em(value: float) -> str:
    return f"{value:g}em"


@dataclass(frozen=True)
class HandLayout:
    offset_em: float
    max_width_em: float
    hover_max_width_em: float
    hover_lift_em: float
    card_hover_lift_em: float

    @property
    def transform(self) -> str:
        return f"translateX(-{em(self.offset_em)})"

    @property
    def hover_transform(self) -> str:
        return f"{self.transform} translateY({em(self.hover_lift_em)})"

    @property
    def card_hover_transform(self) -> str:
        return f"translateY(-{em(self.card_hover_lift_em)})"


def hand_layout(card_width: float = CARD_EM_WIDTH) -> HandLayout:
    """
    Layout numbers of the hand row, all derived from the card width.
    The row is shifted left by half a card to stay centered, and a
    hovered card is lifted by about its own height.
    """

    scale = card_width / CARD_EM_WIDTH
    card_height = CARD_EM_HEIGHT * scale

    return HandLayout(
        offset_em=card_width / 2,
        max_width_em=HAND_MAX_WIDTH_EM * scale,
        hover_max_width_em=HAND_HOVER_MAX_WIDTH_EM * scale,
        hover_lift_em=HAND_HOVER_LIFT_EM * scale,
        card_hover_lift_em=card_height + 1,
    )


def render_card(card: Card) -> ViewNode:
    return h(
        "div",
        h("div", text=card.name, classes=("card-name",)),
        h("div", text=card.description, classes=("card-description",), style={
            "position": "absolute",
            "height": em(CARD_EM_HEIGHT - 5),
            "overflow-y": "scroll",
        }),
        h("div", text=f"#{card.id}", classes=("card-id",)),
        classes=("card", "card-placeholder") if card.is_placeholder else ("card",),
        style={
            "display": "inline-block",
            "width": em(CARD_EM_WIDTH),
            "height": em(CARD_EM_HEIGHT),
            "position": "relative",
        },
        attrs={"data-card-id": str(card.id)},
    )


def render_hand(hand: Hand) -> ViewNode:
    layout = hand_layout()
    items = [
        h("li", render_card(card), classes=("hand-slot",), style={
            "width": "1px",
            "flex-grow": "1",
            "overflow": "visible",
        })
        for card in hand.cards
    ]

    return h(
        "div",
        h("ul", *items, classes=("hand",), style={
            "display": "flex",
            "flex-direction": "row",
            "justify-content": "center",
            "max-width": em(layout.max_width_em),
            "transform": layout.transform,
            "--hover-transform": layout.hover_transform,
            "--hover-max-width": em(layout.hover_max_width_em),
            "--card-hover-transform": layout.card_hover_transform,
        }),
        classes=("hand-container",),
        style={
            "position": "fixed",
            "bottom": f"-{em(CARD_EM_HEIGHT)}",
            "width": "100%",
        },
    )


def render_message(text: str) -> ViewNode:
    return h("div", text=text, classes=("message",))


def render_error(message: str) -> ViewNode:
    return h("div", text=message, classes=("error",), attrs={"role": "alert"})


def render_heading(text: str) -> ViewNode:
    return h("h1", text=text)


def render_link(href: str, text: str) -> ViewNode:
    return h("a", text=text, attrs={"href": href})


def _style_attr(style: Tuple[Tuple[str, str], ...]) -> str:
    return "; ".join(f"{key}: {value}" for key, value in style)


def to_html(node: ViewNode) -> Markup:
    """
    Serializes a view tree. Text and attribute values are escaped.
    """

    attrs = []
    if node.classes:
        attrs.append(("class", " ".join(node.classes)))
    if node.style:
        attrs.append(("style", _style_attr(node.style)))
    attrs.extend(node.attrs)

    rendered_attrs = "".join(f' {name}="{escape(value)}"' for name, value in attrs)
    if node.tag in VOID_TAGS:
        return Markup(f"<{node.tag}{rendered_attrs}>")

    inner = escape(node.text) + Markup("").join(to_html(child) for child in node.children)
    return Markup(f"<{node.tag}{rendered_attrs}>{inner}</{node.tag}>")
