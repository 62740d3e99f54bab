import logging
from dataclasses import dataclass, field

from nuts.cards import Card, remaining_deck
from nuts.hand_evaluator import HandResult, evaluate_five

logger = logging.getLogger(__name__)


@dataclass
class NutsSearchResult:
    best: HandResult
    combos: list[tuple[Card, Card]] = field(default_factory=list)


def two_card_combos(deck: list[Card]) -> list[tuple[Card, Card]]:
    return [(deck[i], deck[j])
            for i in range(len(deck)) for j in range(i + 1, len(deck))]


def find_nuts(flop: list[Card]) -> NutsSearchResult:
    """Evaluate every two-card completion of ``flop`` and keep all ties for the best hand."""
    deck = remaining_deck(flop)

    best = None
    winners: list[tuple[Card, Card]] = []
    for combo in two_card_combos(deck):
        result = evaluate_five([*flop, *combo])
        if best is None or result > best:
            best = result
            winners = [combo]
        elif result == best:
            winners.append(combo)

    logger.debug("Flop %s: best %s %s with %d combos",
                 " ".join(map(str, flop)), best.name, best.kickers, len(winners))
    return NutsSearchResult(best, winners)
