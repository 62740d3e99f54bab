from dataclasses import dataclass
from typing import Optional

from nuts.cards import Card, RANKS, SUITS, RANK_VALUES, ACE_VALUE

HIGH_CARD = 0
PAIR = 1
TWO_PAIR = 2
THREE_OF_A_KIND = 3
STRAIGHT = 4
FLUSH = 5
FULL_HOUSE = 6
FOUR_OF_A_KIND = 7
STRAIGHT_FLUSH = 8

CATEGORY_NAMES = {
    HIGH_CARD: "high card",
    PAIR: "pair",
    TWO_PAIR: "two pair",
    THREE_OF_A_KIND: "three of a kind",
    STRAIGHT: "straight",
    FLUSH: "flush",
    FULL_HOUSE: "full house",
    FOUR_OF_A_KIND: "four of a kind",
    STRAIGHT_FLUSH: "straight flush",
}

WHEEL = {ACE_VALUE, 0, 1, 2, 3}
WHEEL_HIGH = RANK_VALUES["5"]


def compare_hand_values(v1: tuple[int, ...], v2: tuple[int, ...]) -> int:
    """Lexicographic comparison; a missing trailing position counts as -1."""
    for i in range(max(len(v1), len(v2))):
        a = v1[i] if i < len(v1) else -1
        b = v2[i] if i < len(v2) else -1
        if a != b:
            return 1 if a > b else -1
    return 0


@dataclass(frozen=True)
class HandResult:
    category: int
    kickers: tuple[int, ...]

    @property
    def value(self) -> tuple[int, ...]:
        return (self.category, *self.kickers)

    @property
    def name(self) -> str:
        return CATEGORY_NAMES[self.category]

    def _cmp(self, other: "HandResult") -> int:
        return compare_hand_values(self.value, other.value)

    def __lt__(self, other: "HandResult") -> bool:
        return self._cmp(other) < 0

    def __le__(self, other: "HandResult") -> bool:
        return self._cmp(other) <= 0

    def __gt__(self, other: "HandResult") -> bool:
        return self._cmp(other) > 0

    def __ge__(self, other: "HandResult") -> bool:
        return self._cmp(other) >= 0

    def __str__(self) -> str:
        return self.name


def _straight_high(ranks: list[int]) -> Optional[int]:
    v = sorted(set(ranks), reverse=True)
    if len(v) != 5:
        return None
    if set(v) == WHEEL:
        return WHEEL_HIGH  # wheel, 5-high straight
    if v[0] - v[4] == 4:
        return v[0]
    return None


def evaluate_five(cards: list[Card]) -> HandResult:
    if len(cards) != 5:
        raise ValueError(f"Hand must have exactly 5 cards, got {len(cards)}")

    rank_counts = [0] * len(RANKS)
    suit_counts = [0] * len(SUITS)
    for c in cards:
        rank_counts[c.value] += 1
        suit_counts[SUITS.index(c.suit)] += 1

    values = sorted((c.value for c in cards), reverse=True)
    flush = max(suit_counts) == 5
    straight_high = _straight_high(values)

    if flush and straight_high is not None:
        return HandResult(STRAIGHT_FLUSH, (straight_high,))

    # (count desc, rank desc)
    groups = sorted(
        ((n, r) for r, n in enumerate(rank_counts) if n),
        reverse=True,
    )
    counts = [n for n, _ in groups]
    ordered = tuple(r for _, r in groups)

    if counts[0] == 4:
        return HandResult(FOUR_OF_A_KIND, ordered)

    if counts[0] == 3 and counts[1] == 2:
        return HandResult(FULL_HOUSE, ordered)

    if flush:
        return HandResult(FLUSH, tuple(values))

    if straight_high is not None:
        return HandResult(STRAIGHT, (straight_high,))

    if counts[0] == 3:
        return HandResult(THREE_OF_A_KIND, ordered)

    if counts[0] == 2 and counts[1] == 2:
        return HandResult(TWO_PAIR, ordered)

    if counts[0] == 2:
        return HandResult(PAIR, ordered)

    return HandResult(HIGH_CARD, tuple(values))
