from dataclasses import dataclass

RANKS = "23456789TJQKA"
SUITS = "hdcs"
RANK_VALUES = {r: i for i, r in enumerate(RANKS)}
ACE_VALUE = RANK_VALUES["A"]


@dataclass(frozen=True)
class Card:
    rank: str
    suit: str

    def __post_init__(self):
        if self.rank not in RANK_VALUES:
            raise ValueError(f"Invalid rank: {self.rank}")
        if len(self.suit) != 1 or self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def value(self) -> int:
        return RANK_VALUES[self.rank]

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card('{self.rank}{self.suit}')"


def parse_card(notation: str) -> Card:
    if len(notation) != 2:
        raise ValueError(f"Invalid card format: {notation!r}")
    return Card(notation[0], notation[1])


def format_card(card: Card) -> str:
    return f"{card.rank}{card.suit}"


def parse_board(notation: str) -> list[Card]:
    notation = notation.strip().replace(" ", "").replace(",", "")
    if len(notation) % 2 != 0:
        raise ValueError(f"Invalid board notation: {notation}")
    return [parse_card(notation[i:i+2]) for i in range(0, len(notation), 2)]


def new_deck() -> list[Card]:
    return [Card(r, s) for s in SUITS for r in RANKS]


def check_flop(flop: list[Card]) -> None:
    if len(flop) != 3:
        raise ValueError(f"Flop must be exactly 3 cards, got {len(flop)}")
    if len(set(flop)) != 3:
        raise ValueError(f"Flop contains duplicate cards: {' '.join(map(str, flop))}")


def remaining_deck(flop: list[Card]) -> list[Card]:
    check_flop(flop)
    excluded = set(flop)
    return [c for c in new_deck() if c not in excluded]


def deal_flop(rng) -> list[Card]:
    """Fisher-Yates shuffle a fresh deck with ``rng`` and return the top 3 cards."""
    deck = new_deck()
    for i in range(len(deck) - 1, 0, -1):
        j = rng.rand_int(i + 1)
        deck[i], deck[j] = deck[j], deck[i]
    return deck[:3]


def order_ranks(c1: Card, c2: Card) -> tuple[str, str]:
    if c1.value >= c2.value:
        return c1.rank, c2.rank
    return c2.rank, c1.rank


def flush_suit(flop: list[Card]):
    """Suit shared by all three flop cards, or None."""
    for s in SUITS:
        if sum(1 for c in flop if c.suit == s) >= 3:
            return s
    return None
