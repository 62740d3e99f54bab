import logging
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from nuts.cards import check_flop, deal_flop, parse_board
from nuts.guess import validate_guess
from nuts.patterns import evaluate_nuts
from nuts.rng import Rng

console = Console()


def _format_flop(flop) -> str:
    return " ".join(str(c) for c in flop)


def _parse_flop(ctx, param, value):
    if value is None:
        return None
    try:
        flop = parse_board(value)
        check_flop(flop)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    return flop


def _show_nuts(flop):
    result = evaluate_nuts(flop)
    console.print(f"[bold]Flop:[/bold] {_format_flop(flop)}")
    console.print(f"[bold]Nuts:[/bold] {', '.join(result.patterns)} ({result.explanation})")


def _play(rng: Rng, rounds: Optional[int]):
    console.print("[bold]Poker Nuts Practice[/bold]")
    console.print("Type your guess like: AA, KQs, A5o, or exact AhQh")
    console.print("Type 'q' to quit\n")

    played = 0
    while rounds is None or played < rounds:
        flop = deal_flop(rng)
        console.print(f"Flop: [cyan]{_format_flop(flop)}[/cyan]")
        try:
            guess = click.prompt("Guess the nuts", default="", show_default=False).strip()
        except click.Abort:
            console.print()
            break
        played += 1

        if guess.lower() == "q":
            break
        if not guess:
            console.print("Please enter a guess or 'q' to quit\n")
            continue

        result = validate_guess(flop, guess)
        if result.correct:
            console.print(f"[green]{result.reason}[/green]\n")
        else:
            console.print(f"[red]{result.reason}[/red]\n")

    console.print("Thanks for playing!")


@click.command()
@click.option("--seed", type=int, envvar="NUTS_SEED", default=None,
              help="Seed for dealing flops (default: clock).")
@click.option("--flop", callback=_parse_flop, default=None,
              help="Show the nuts for this board, e.g. 'Ah Kh Qh', and exit.")
@click.option("--rounds", type=click.IntRange(min=1), default=None,
              help="Stop after this many rounds.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(seed, flop, rounds, verbose):
    """Practice finding the nuts on random flops."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s",
                            handlers=[RichHandler(console=console)])

    if flop is not None:
        _show_nuts(flop)
        return

    _play(Rng(seed), rounds)


if __name__ == "__main__":
    main()
