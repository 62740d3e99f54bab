import logging
from dataclasses import dataclass
from typing import Optional, Union

from nuts.cards import Card, RANKS, RANK_VALUES, SUITS, flush_suit
from nuts.patterns import evaluate_nuts

logger = logging.getLogger(__name__)

FORMAT_HINT = "Guess must be like 'AA', 'KQs', 'A5o', or exact 'AhQh'"


@dataclass(frozen=True)
class ParsedGuess:
    canonical: str


@dataclass(frozen=True)
class GuessFormatError:
    message: str


@dataclass
class GuessResult:
    correct: bool
    reason: str
    canonical_nuts: list[str]
    canonical_guess: Optional[str] = None


def _high_low(r1: str, r2: str) -> str:
    if RANK_VALUES[r1] > RANK_VALUES[r2]:
        return r1 + r2
    return r2 + r1


def parse_guess(guess: str, flop: list[Card]) -> Union[ParsedGuess, GuessFormatError]:
    cleaned = guess.strip().upper()

    if len(cleaned) == 2:
        r1, r2 = cleaned
        if r1 not in RANKS or r2 not in RANKS:
            return GuessFormatError(FORMAT_HINT)
        return ParsedGuess(_high_low(r1, r2))

    if len(cleaned) == 3:
        r1, r2, modifier = cleaned
        if r1 not in RANKS or r2 not in RANKS:
            return GuessFormatError(FORMAT_HINT)
        ranks = _high_low(r1, r2)
        if modifier == "S":
            return ParsedGuess(ranks + (flush_suit(flop) or "s"))
        if modifier == "O":
            return ParsedGuess(ranks + "o")
        if modifier.lower() in SUITS:
            return ParsedGuess(ranks + modifier.lower())
        return GuessFormatError(FORMAT_HINT)

    if len(cleaned) == 4:
        r1, s1, r2, s2 = cleaned[0], cleaned[1].lower(), cleaned[2], cleaned[3].lower()
        if r1 not in RANKS or r2 not in RANKS or s1 not in SUITS or s2 not in SUITS:
            return GuessFormatError(FORMAT_HINT)
        if r1 == r2:
            return ParsedGuess(r1 + r2)
        ranks = _high_low(r1, r2)
        if s1 != s2:
            return ParsedGuess(ranks + "o")
        if s1 == flush_suit(flop):
            return ParsedGuess(ranks + s1)
        return ParsedGuess(ranks + "s")

    return GuessFormatError(FORMAT_HINT)


def matches_nuts(canonical: str, patterns: list[str]) -> bool:
    """Exact match, or a bare rank pair that prefixes a qualified pattern."""
    if canonical in patterns:
        return True
    return len(canonical) == 2 and any(p.startswith(canonical) for p in patterns)


def validate_guess(flop: list[Card], guess: str) -> GuessResult:
    nuts = evaluate_nuts(flop)
    parsed = parse_guess(guess, flop)

    if isinstance(parsed, GuessFormatError):
        logger.debug("Rejected guess %r: %s", guess, parsed.message)
        return GuessResult(False, f"Invalid format. {parsed.message}", nuts.patterns)

    correct = matches_nuts(parsed.canonical, nuts.patterns)
    if correct:
        reason = "Correct!"
    else:
        reason = f"Incorrect. Nuts: {', '.join(nuts.patterns)}"
    return GuessResult(correct, reason, nuts.patterns, parsed.canonical)
