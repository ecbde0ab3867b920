"""Rich terminal frontend: board table, stats, solved bands and status.

Renders a :class:`GameSession` and forwards keypresses to it.  All game
rules live in the backend; this module only draws and paces.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import TILES_PER_GROUP
from backend.engine.gameplay import GameEngine
from backend.engine.gamestate import MAX_MISTAKES
from backend.engine.session import GameSession
from backend.models.tile import Tile
from frontend.cli.input_handler import get_key

console = Console()

CHECK_DELAY = 0.3
GRID = TILES_PER_GROUP

RULES = (
    "Find groups of 4 tiles that share something in common.\n"
    "Select up to 4 tiles; a full selection is checked automatically.\n"
    f"You can make {MAX_MISTAKES} mistakes before the game is over.\n"
    "Harder categories are worth more points. Hints cost 50 points,\n"
    "mistakes cost 25. The game saves after every guess."
)


# -- board rendering ----------------------------------------------------------


def _tile_cell(tile: Tile, focused: bool) -> str:
    word = tile.word
    if focused:
        word = f"[reverse]{word}[/reverse]"
    if tile.matched:
        return f"[dim]{word}[/dim]"
    if tile.selected:
        return f"[bold white on grey37]{word}[/bold white on grey37]"
    return f"[bold]{word}[/bold]"


def _render_board(engine: GameEngine, cursor: int) -> Table:
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    width = max(len(tile.word) for tile in engine.tiles())
    for _ in range(GRID):
        table.add_column(width=width, justify="center")

    tiles = engine.tiles()
    for r in range(GRID):
        row = tiles[r * GRID : (r + 1) * GRID]
        table.add_row(
            *(
                _tile_cell(tile, r * GRID + c == cursor)
                for c, tile in enumerate(row)
            )
        )
    return table


def _render_solved(engine: GameEngine) -> Group:
    bands: list[Text] = []
    for category in engine.solved_categories():
        words = ", ".join(
            t.word for t in engine.tiles() if t.category == category
        )
        band = Text()
        band.append(
            f" {category.name.upper()} ",
            style=f"bold black on {category.color}",
        )
        band.append(f"  {words}", style="dim")
        bands.append(band)
    return Group(*bands)


def _render_stats(engine: GameEngine) -> Text:
    lives = "●" * engine.remaining_lives() + "○" * engine.mistakes
    stats = Text()
    stats.append("  Score: ", style="dim")
    stats.append(str(engine.score), style="bold yellow")
    stats.append("    Lives: ", style="dim")
    stats.append(lives, style="bold red")
    stats.append("    Hints: ", style="dim")
    stats.append(str(engine.hints_used), style="bold yellow")
    return stats


def _controls() -> Text:
    controls = Text()
    for key, label in (
        ("↑↓←→", "move"),
        ("Space", "select"),
        ("C", "deselect"),
        ("X", "shuffle"),
        ("N", "hint"),
        ("R", "new game"),
        ("Q", "quit"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")
    return controls


def _draw(session: GameSession, cursor: int, status: str = "") -> None:
    console.clear()
    engine = session.engine

    body = Group(
        _render_solved(engine),
        Text(""),
        Align.center(_render_board(engine, cursor)),
    )
    panel = Panel(
        body,
        title="[bold]T I L E S[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_render_stats(engine)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _draw_game_over(session: GameSession) -> None:
    engine = session.engine
    if engine.is_won:
        headline = "[bold green]★ You found every group! ★[/bold green]"
    else:
        headline = "[bold red]Out of lives. Better luck next time.[/bold red]"
        missing = [
            c for c in engine.categories() if c not in engine.solved_categories()
        ]
        headline += "\n" + "\n".join(
            f"[dim]{c.name}:[/dim] "
            + ", ".join(t.word for t in engine.tiles() if t.category == c)
            for c in missing
        )
    console.print(Align.center(Text.from_markup(f"\n{headline}\n")))
    console.print(
        Align.center(Text("  Press R to play again, Q to quit.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _move_cursor(cursor: int, key: str) -> int:
    r, c = divmod(cursor, GRID)
    if key == "up":
        r = (r - 1) % GRID
    elif key == "down":
        r = (r + 1) % GRID
    elif key == "left":
        c = (c - 1) % GRID
    elif key == "right":
        c = (c + 1) % GRID
    return r * GRID + c


def _check(session: GameSession, cursor: int) -> str:
    _draw(session, cursor)
    time.sleep(CHECK_DELAY)
    outcome = session.check_selection()
    if outcome.valid:
        return f"[green]✓ Correct! {outcome.category.name}[/green]"
    return f"[red]✗ {outcome.message}[/red]"


def _ask_resume(session: GameSession) -> str:
    if not session.store.exists():
        console.print(Panel(RULES, title="How to play", border_style="cyan"))
        console.print(Text("  Press any key to start.", style="dim"))
        get_key()
        return ""

    console.clear()
    prompt = Text("\nA saved game was found. Continue? (Y/N)\n", style="bold")
    console.print(Align.center(prompt))
    if get_key() == "yes" and session.load():
        return "[cyan]Game loaded.[/cyan]"
    return ""


def play(session: GameSession) -> None:
    """Run the interactive loop until the player quits."""
    cursor = 0
    status = _ask_resume(session)

    while True:
        _draw(session, cursor, status)
        status = ""

        if session.engine.is_over:
            _draw_game_over(session)

        key = get_key()

        if key in ("up", "down", "left", "right"):
            cursor = _move_cursor(cursor, key)
        elif key == "toggle":
            status = session.toggle_tile(cursor) or ""
            if session.ready_to_check:
                status = _check(session, cursor)
        elif key == "deselect":
            session.deselect_all()
        elif key == "shuffle" and not session.engine.is_over:
            session.shuffle()
            status = "[yellow]Tiles shuffled![/yellow]"
        elif key == "hint":
            status = f"[cyan]{session.use_hint()}[/cyan]"
        elif key == "new":
            session.new_game()
            status = "[cyan]New game started! Good luck![/cyan]"
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(session: GameSession, resume: bool = True) -> None:
    """Launch the Rich terminal frontend for *session*."""
    if not resume:
        session.store.delete()
    play(session)
