from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


PLACEHOLDER_ID = -1


class Card(BaseModel):
    """
    One card, as the server sends it.
    Immutable once built.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str

    @classmethod
    def placeholder(cls) -> "Card":
        """
        Template card shown while the real one is still loading.
        """

        return cls(
            id=PLACEHOLDER_ID,
            name="Loading...",
            description="This is a template for a loading card",
        )

    @property
    def is_placeholder(self) -> bool:
        return self.id == PLACEHOLDER_ID


class Hand(BaseModel):
    """
    Ordered cards of one player, left to right.
    The body of GET /api/cards has exactly this shape.
    """

    model_config = ConfigDict(frozen=True)

    cards: List[Card] = Field(default_factory=list)


class EquipmentSlots(BaseModel):
    model_config = ConfigDict(frozen=True)

    head: Optional[Card] = None
    torso: Optional[Card] = None
    legs: Optional[Card] = None
    necklace: Optional[Card] = None
    left_hand: Optional[Card] = None
    right_hand: Optional[Card] = None


class PlayerSummary(BaseModel):
    """
    What the table shows about an opponent: no cards, only their count.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    card_count: int = Field(..., alias="nb_cards")
    equipment: EquipmentSlots = Field(default_factory=EquipmentSlots)


class Table(BaseModel):
    model_config = ConfigDict(frozen=True)

    your_hand: Hand
    players: List[PlayerSummary] = Field(default_factory=list)
