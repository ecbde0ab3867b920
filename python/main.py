#!/usr/bin/env python3
"""Tiles: find the four hidden groups of four.

Usage::

    python main.py                       # resume or start the built-in puzzle
    python main.py --new                 # ignore any saved game
    python main.py --puzzle my.json      # play a custom puzzle file
    python main.py --export backup.json  # copy the saved game and exit
    python main.py --import backup.json  # resume an exported game
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


# -- helpers ------------------------------------------------------------------


def _configure_logging(data_dir: Path, level: LogLevel) -> None:
    # Log to a file; the terminal belongs to the board.
    data_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=data_dir / "tiles.log",
        level=level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_engine(puzzle: Optional[Path]):
    from backend.engine.gamegenerator import PuzzleGenerator
    from backend.engine.gameplay import GameEngine
    from backend.errors import PuzzleSetupError

    if puzzle is None:
        return GameEngine()
    try:
        tiles, categories = PuzzleGenerator.load_puzzle(puzzle)
    except (OSError, PuzzleSetupError) as exc:
        typer.echo(f"Could not read puzzle {puzzle}: {exc}", err=True)
        raise typer.Exit(code=1)
    return GameEngine(tiles, categories)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        help="Directory holding the save file, its backup and the log.",
    ),
    puzzle: Optional[Path] = typer.Option(
        None, "-p", "--puzzle",
        exists=True, dir_okay=False,
        help="Custom puzzle JSON file. Invalid puzzles fall back to the built-in one.",
    ),
    new: bool = typer.Option(
        False, "--new",
        help="Start fresh and delete any saved game.",
    ),
    export: Optional[Path] = typer.Option(
        None, "--export",
        help="Write the saved game to this path and exit.",
    ),
    import_path: Optional[Path] = typer.Option(
        None, "--import",
        exists=True, dir_okay=False,
        help="Resume a game previously written with --export.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        case_sensitive=False,
        help="Logging level for the log file.",
    ),
) -> None:
    """Tiles puzzle game."""
    _configure_logging(data_dir, log_level)

    from backend.engine.session import GameSession
    from backend.persistence import JsonFileStore

    store = JsonFileStore.in_directory(data_dir)

    if export is not None:
        engine = store.load()
        if engine is None or not JsonFileStore.export_game(engine, export):
            typer.echo("No saved game to export.", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Saved game exported to {export}.")
        return

    from frontend.cli.rich.app import run

    session = GameSession(_build_engine(puzzle), store)
    if import_path is not None:
        if not session.import_game(import_path):
            typer.echo(f"Could not import {import_path}.", err=True)
            raise typer.Exit(code=1)
        session.save()
    run(session, resume=not new)


if __name__ == "__main__":
    app()
