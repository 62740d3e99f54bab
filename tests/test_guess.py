import pytest
from nuts.cards import parse_board
from nuts.guess import (
    FORMAT_HINT, GuessFormatError, ParsedGuess, matches_nuts, parse_guess,
    validate_guess,
)
from nuts.patterns import evaluate_nuts

ROYAL = parse_board("AhKhQh")
QUADS = parse_board("7c7d2s")
STRAIGHT = parse_board("9hTdJc")
RAINBOW = parse_board("AhKdQs")


class TestParseGuess:
    def test_pair(self):
        assert parse_guess("77", QUADS) == ParsedGuess("77")

    def test_two_ranks_ordered(self):
        assert parse_guess("qk", STRAIGHT) == ParsedGuess("KQ")

    def test_suited_without_flush_suit(self):
        assert parse_guess("KQs", STRAIGHT) == ParsedGuess("KQs")

    def test_suited_maps_to_flush_suit(self):
        assert parse_guess("JTs", ROYAL) == ParsedGuess("JTh")

    def test_offsuit(self):
        assert parse_guess("QKo", STRAIGHT) == ParsedGuess("KQo")

    def test_literal_suit(self):
        assert parse_guess("JTh", ROYAL) == ParsedGuess("JTh")
        assert parse_guess("JTd", ROYAL) == ParsedGuess("JTd")

    def test_explicit_cards_in_flush_suit(self):
        assert parse_guess("JhTh", ROYAL) == ParsedGuess("JTh")

    def test_explicit_cards_suited_off_flush(self):
        assert parse_guess("ThJs", ROYAL) == ParsedGuess("JTo")
        assert parse_guess("TsJs", ROYAL) == ParsedGuess("JTs")

    def test_explicit_cards_offsuit(self):
        assert parse_guess("QdKh", STRAIGHT) == ParsedGuess("KQo")

    def test_explicit_pair(self):
        assert parse_guess("7h7s", QUADS) == ParsedGuess("77")

    def test_whitespace_trimmed(self):
        assert parse_guess("  kq  ", STRAIGHT) == ParsedGuess("KQ")

    @pytest.mark.parametrize("bad", ["ZZ", "15", "QQx", "A", "AKQJT", "AxKh", "", "K Q"])
    def test_format_errors(self, bad):
        assert parse_guess(bad, RAINBOW) == GuessFormatError(FORMAT_HINT)


class TestMatchesNuts:
    def test_exact(self):
        assert matches_nuts("KQo", ["KQo", "KQs"])

    def test_bare_prefix(self):
        assert matches_nuts("JT", ["JTh"])

    def test_qualified_is_not_prefix(self):
        assert not matches_nuts("JTs", ["JTh"])

    def test_miss(self):
        assert not matches_nuts("Q8", ["KQo", "KQs"])


class TestValidateGuess:
    def test_royal_flush_guesses(self):
        assert validate_guess(ROYAL, "JTh").correct
        assert validate_guess(ROYAL, "JhTh").correct
        assert validate_guess(ROYAL, "JTs").correct
        assert validate_guess(ROYAL, "JT").correct

    def test_wrong_suit_for_royal(self):
        result = validate_guess(ROYAL, "JsTs")
        assert not result.correct
        assert result.canonical_guess == "JTs"

    def test_quads(self):
        result = validate_guess(QUADS, "77")
        assert result.correct
        assert result.reason == "Correct!"
        assert result.canonical_guess == "77"
        assert result.canonical_nuts == ["77"]

    def test_incorrect_reason_lists_nuts(self):
        result = validate_guess(QUADS, "22")
        assert not result.correct
        assert result.reason == "Incorrect. Nuts: 77"

    def test_straight_any_suits(self):
        assert validate_guess(STRAIGHT, "KQo").correct
        assert validate_guess(STRAIGHT, "KQs").correct
        assert validate_guess(STRAIGHT, "KhQd").correct
        result = validate_guess(STRAIGHT, "Q8o")
        assert not result.correct
        assert result.reason == "Incorrect. Nuts: KQo, KQs"

    @pytest.mark.parametrize("bad", ["ZZ", "15", "QQx"])
    def test_invalid_format(self, bad):
        result = validate_guess(RAINBOW, bad)
        assert not result.correct
        assert "format" in result.reason
        assert result.reason.startswith("Invalid format.")
        assert result.canonical_guess is None
        assert result.canonical_nuts == evaluate_nuts(RAINBOW).patterns

    @pytest.mark.parametrize("notation", [
        "JhTd9s", "AhKh7h", "AsAhKd", "2c3c4c", "2c7dKs", "Ac5d4s", "6d6c2d",
    ])
    def test_every_nuts_pattern_validates(self, notation):
        flop = parse_board(notation)
        for pattern in evaluate_nuts(flop).patterns:
            assert validate_guess(flop, pattern).correct
            assert validate_guess(flop, pattern[:2]).correct
