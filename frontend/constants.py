# Every card-dependent layout value is derived from this width.
CARD_EM_WIDTH = 10.0
CARD_EM_HEIGHT = 14.0

# How far the hand is lifted when hovered, and how much narrower it gets.
HAND_HOVER_LIFT_EM = 2.0
HAND_MAX_WIDTH_EM = 5 * CARD_EM_WIDTH
HAND_HOVER_MAX_WIDTH_EM = 4 * CARD_EM_WIDTH

DEFAULT_API_BASE = "http://localhost:8080"
DEFAULT_FRONTEND_PORT = 5000

PAGE_TITLE = "Card Table"
