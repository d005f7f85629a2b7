from backend.schemas import Card, Hand


LOREM_IPSUM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Aliquam sapien neque, "
    "viverra ac augue sed, hendrerit tincidunt nunc. Etiam interdum mollis dolor. "
    "Cras vehicula dictum massa sit amet finibus. Duis id gravida urna, in ullamcorper "
    "libero. Mauris volutpat nisi id auctor tempor. Vivamus viverra nisi et sapien "
    "porttitor, nec auctor nisi pellentesque. Aliquam sed purus arcu. Ut eget ornare ex. "
    "Cras eu enim tellus. Aenean semper felis ac enim dictum mattis at quis risus. "
    "Curabitur vel leo a dolor tristique aliquet in in dolor."
)

HAND_SIZE = 10


def card_list() -> Hand:
    """
    Builds the demo hand: cards 1..10, the first one with a long text
    so the scrolling description can be seen.
    Rebuilt on every call, nothing is cached.
    """

    cards = [Card(id=1, name="Card 1", description=LOREM_IPSUM)]
    cards.extend(
        Card(id=n, name=f"Card {n}", description=f"Description {n}")
        for n in range(2, HAND_SIZE + 1)
    )

    return Hand(cards=cards)


def card(card_id: int) -> Card:
    return Card(id=card_id, name=f"Card {card_id}", description=LOREM_IPSUM)
