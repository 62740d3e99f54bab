import logging
from dataclasses import dataclass

from nuts.cards import Card, ACE_VALUE, flush_suit, order_ranks
from nuts.hand_evaluator import FLUSH, STRAIGHT_FLUSH, HandResult
from nuts.search import find_nuts

logger = logging.getLogger(__name__)


@dataclass
class NutsResult:
    patterns: list[str]
    explanation: str


def canonicalize(combos: list[tuple[Card, Card]], flop: list[Card],
                 best: HandResult) -> list[str]:
    """Reduce the winning combos to a sorted set of shorthand patterns.

    Pairs become the doubled rank ("77"). Non-pairs are written high rank
    first, followed by the board's flush suit when the nuts is a flush or
    straight flush ("JTh"), or by "s"/"o" otherwise ("KQs", "KQo").
    """
    board_suit = flush_suit(flop)
    needs_specific_suit = best.category in (FLUSH, STRAIGHT_FLUSH)
    patterns = set()

    for c1, c2 in combos:
        high, low = order_ranks(c1, c2)
        if high == low:
            patterns.add(high + low)
            continue
        suited = c1.suit == c2.suit
        if needs_specific_suit:
            if board_suit and suited and c1.suit == board_suit:
                patterns.add(high + low + board_suit)
        else:
            patterns.add(high + low + ("s" if suited else "o"))

    if not patterns and needs_specific_suit:
        logger.debug("No flush-suited pattern on first pass, rescanning")
        for c1, c2 in combos:
            high, low = order_ranks(c1, c2)
            if c1.suit == c2.suit and c1.suit == board_suit:
                patterns.add(high + low + board_suit)

    if not patterns:
        logger.debug("Falling back to rank-only patterns for %d combos", len(combos))
        for c1, c2 in combos:
            high, low = order_ranks(c1, c2)
            patterns.add(high + low)

    return sorted(patterns)


def explain(best: HandResult) -> str:
    if best.category == STRAIGHT_FLUSH and best.kickers[0] == ACE_VALUE:
        return "royal flush"
    return best.name


def evaluate_nuts(flop: list[Card]) -> NutsResult:
    search = find_nuts(flop)
    return NutsResult(canonicalize(search.combos, flop, search.best),
                      explain(search.best))
