"""Command line poker odds calculator."""

import logging
import random

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from .calculator import OddsResult, classify_best_hand, compute_odds
from .card import Card, parse_cards
from .config import SimulationConfig, get_config
from .hand import HandCategory
from .stage import Street, suggest_street

app = typer.Typer(help="Odds of making each poker hand by the flop, turn or river")
console = Console()


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-V", help="Show debug logging"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def format_card(c: Card) -> str:
    """Format a card with color based on suit."""
    if c.suit.is_red:
        return f"[red]{c}[/red]"
    return f"[white]{c}[/white]"


def format_cards(cards: list[Card]) -> str:
    """Format multiple cards."""
    return " ".join(format_card(c) for c in cards)


def format_percent(value: float) -> str:
    """Two decimals, with tiny non-zero chances shown as '<0.01%'."""
    if 0 < value < 0.01:
        return "<0.01%"
    return f"{value:.2f}%"


def odds_table(result: OddsResult) -> Table:
    """Render an OddsResult as an 'at least' table."""
    method = "exact" if result.exact else f"{result.runs:,} simulations"
    table = Table(title=f"Odds by the {result.street} ({method})", min_width=44)
    table.add_column("At Least", style="cyan")
    table.add_column("Chance", justify="right")

    for category, pct in result.items():
        style = "green" if pct > 0 else "dim"
        table.add_row(category.label, f"[{style}]{format_percent(pct)}[/{style}]")

    return table


def best_hand_panel(category: HandCategory) -> Panel:
    return Panel(
        f"[bold]{category.label}[/bold]\n[dim italic]{category.frequency}[/dim italic]",
        title="Your Hand",
        expand=False,
    )


def _board_slots(board: list[Card]) -> list[Card | None]:
    if len(board) > 5:
        raise ValueError(f"Board can have at most 5 cards, got {len(board)}")
    return list(board) + [None] * (5 - len(board))


@app.command()
def odds(
    hole: str = typer.Argument(..., help="Your hole cards (e.g., 'As Kh')"),
    board: str | None = typer.Option(None, "--board", "-b", help="Board cards in deal order"),
    street: str | None = typer.Option(None, "--street", "-s", help="flop, turn or river"),
    trials: int | None = typer.Option(None, "--trials", "-n", help="Simulations when 3+ cards are missing"),
    seed: int | None = typer.Option(None, "--seed", help="Random seed for simulations"),
):
    """Chance of holding at least each hand by a street."""
    config = get_config()
    try:
        hole_cards = parse_cards(hole)
        if len(hole_cards) != 2:
            raise ValueError(f"Expected 2 hole cards, got {len(hole_cards)}")
        board_cards = parse_cards(board) if board else []
        slots = _board_slots(board_cards)
        target = Street.parse(street) if street else suggest_street(slots)
        simulation = config.simulation
        if trials is not None:
            simulation = SimulationConfig(
                trials=trials, exact_max_needed=simulation.exact_max_needed
            )

        console.print(f"\n[bold]Your hand:[/bold] {format_cards(hole_cards)}")
        if board_cards:
            console.print(f"[bold]Board:[/bold]     {format_cards(board_cards)}")

        result = compute_odds(
            hole_cards,
            slots,
            target,
            config=simulation,
            rng=random.Random(seed) if seed is not None else None,
        )
        # Both hole cards are always known here
        assert result is not None
        console.print(odds_table(result))

        if len(board_cards) == 5:
            console.print(best_hand_panel(classify_best_hand(hole_cards + board_cards)))

    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def best(
    cards: str = typer.Argument(..., help="Known cards (e.g., 'As Ah Ad Ac 2s 2h 2d')"),
):
    """Best hand category the cards make."""
    try:
        known = parse_cards(cards)
        console.print(f"\n[bold]Cards:[/bold] {format_cards(known)}")
        console.print(best_hand_panel(classify_best_hand(known)))
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _prompt_cards(prompt_text: str, expected_count: int, taken: list[Card]) -> list[Card] | None:
    """Prompt for cards with validation. Returns None if user quits."""
    while True:
        response = Prompt.ask(prompt_text)

        if response.lower() == "quit":
            return None

        try:
            cards = parse_cards(response)
            if len(cards) != expected_count:
                console.print(f"[red]Expected {expected_count} card(s), got {len(cards)}[/red]")
                continue
            clash = [c for c in cards if c in taken]
            if clash or len(set(cards)) != len(cards):
                console.print(f"[red]Already selected: {format_cards(clash or cards)}[/red]")
                continue
            return cards
        except ValueError as e:
            console.print(f"[red]Invalid card: {e}[/red]")


@app.command()
def interactive():
    """Interactive mode - track odds as the hand is dealt."""
    config = get_config()
    console.print(Panel("[bold]Poker Odds - Interactive Mode[/bold]"))
    console.print("[dim]Card format: As Kh Td 9c 2s (rank + suit)[/dim]")
    console.print("[dim]Type 'quit' to exit[/dim]\n")

    try:
        hole_cards = _prompt_cards("[bold]Your hole cards[/bold]", 2, [])
        if hole_cards is None:
            return
        console.print(f"  → {format_cards(hole_cards)}\n")

        board: list[Card] = []
        streets = [("Preflop", 0), ("Flop", 3), ("Turn", 1), ("River", 1)]

        for street_name, cards_needed in streets:
            console.print(f"[bold cyan]── {street_name} ──[/bold cyan]")

            if cards_needed > 0:
                new_cards = _prompt_cards(
                    f"[bold]{street_name} cards[/bold]", cards_needed, hole_cards + board
                )
                if new_cards is None:
                    return
                board.extend(new_cards)
                console.print(f"  → Board: {format_cards(board)}")

            slots = _board_slots(board)
            result = compute_odds(hole_cards, slots, config=config.simulation)
            assert result is not None
            console.print(odds_table(result))

            if len(board) == 5:
                console.print(best_hand_panel(classify_best_hand(hole_cards + board)))

    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
    except KeyboardInterrupt:
        console.print("\n[dim]Exiting...[/dim]")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
