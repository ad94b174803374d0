from __future__ import annotations

from collections.abc import Callable, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.models import AnswerOption, Card, Suit, TrainingScenario
from ..dynamic.cards import canonical_hand_abbrev
from ..features.stats import SummaryStats

__all__ = ["RichDrillPresenter"]

# four-color deck, readable on light and dark terminals
_SUIT_COLORS = {
    Suit.SPADES: "bold white",
    Suit.HEARTS: "bold #c14657",
    Suit.DIAMONDS: "bold #2f73d2",
    Suit.CLUBS: "bold #2f8a5e",
}

QUIT = "q"


class RichDrillPresenter:
    def __init__(
        self,
        *,
        no_color: bool = False,
        console: Console | None = None,
        input_fn: Callable[[str], str] = input,
    ) -> None:
        if console is not None:
            self.console = console
        elif no_color:
            self.console = Console(force_terminal=False, color_system=None)
        else:
            self.console = Console(force_terminal=True, color_system="auto")
        self._input = input_fn

    def show_scenario(self, scenario: TrainingScenario, index: int, total: int) -> None:
        setup = scenario.table_setup
        self.console.rule(f"{scenario.topic.display_name.upper()} ({index}/{total})")

        info = Table.grid(padding=(0, 1))
        info.add_column(style="bold cyan", justify="right")
        info.add_column(justify="left")
        info.add_row("Scenario", scenario.scenario_id)
        info.add_row("Position", str(setup.hero_position))
        info.add_row("Your hand", f"{self.format_cards(setup.hero_hand)} [dim]({canonical_hand_abbrev(setup.hero_hand)})[/]")
        if setup.board:
            info.add_row("Board", self.format_cards(setup.board))
        info.add_row("Pot", f"{setup.pot_size} chips")
        if setup.current_bet:
            info.add_row("Facing", f"{setup.current_bet} chips")
        self.console.print(Panel(info, title="Table Status", border_style="magenta", expand=False))
        self.console.print(scenario.question)

        table = Table(show_header=True, header_style="bold blue", box=box.SIMPLE_HEAVY)
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Action", style="bold")
        for answer in scenario.answers:
            table.add_row(answer.id, answer.text)
        self.console.print(table)

    def prompt_answer(self, scenario: TrainingScenario) -> str | None:
        """Return an answer id, or ``None`` when the user quits."""

        ids = [answer.id for answer in scenario.answers]
        while True:
            raw = self._input(f"Your answer ({'/'.join(ids)}), or 'q' to quit: ").strip().upper()
            if raw.lower() == QUIT:
                return None
            if raw in ids:
                return raw
            self.console.print(f"[red]Invalid input[/]. Please enter one of {', '.join(ids)} or 'q'.")

    def feedback(self, scenario: TrainingScenario, chosen: AnswerOption) -> None:
        best = scenario.correct_answer
        if chosen.is_correct:
            self.console.print(f"✓ [green]Correct[/]: {chosen.id}. {chosen.text}")
        else:
            self.console.print(f"✗ [yellow]Better was[/]: {best.id}. {best.text}")
        self.console.print(f"Why (your answer): {chosen.explanation}")
        if not chosen.is_correct:
            self.console.print(f"Why (best answer): {best.explanation}")
        self.console.print(f"[dim]Branch: {scenario.branch_key}[/]\n")

    def reveal(self, scenario: TrainingScenario) -> None:
        table = Table(show_header=True, header_style="bold blue", box=box.SIMPLE_HEAVY)
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Action", style="bold")
        table.add_column("Explanation", overflow="fold")
        for answer in scenario.answers:
            marker = "[green]✓[/] " if answer.is_correct else ""
            table.add_row(answer.id, f"{marker}{answer.text}", answer.explanation)
        self.console.print(table)
        self.console.print(f"[dim]Branch: {scenario.branch_key}[/]\n")

    def summary(self, stats: SummaryStats) -> None:
        if stats.answered == 0:
            self.console.print("No drills answered.")
            return
        summary = Table(title="Session Summary", show_header=False)
        summary.add_row("Drills answered:", str(stats.answered))
        summary.add_row("Correct:", f"{stats.correct} ({stats.accuracy_pct:.0f}%)")
        for topic, bucket in stats.by_topic.items():
            summary.add_row(f"  {topic}:", f"{bucket.correct}/{bucket.answered}")
        self.console.print(summary)

    def format_cards(self, cards: Sequence[Card]) -> str:
        return " ".join(f"[{_SUIT_COLORS[card.suit]}]{card}[/]" for card in cards)
