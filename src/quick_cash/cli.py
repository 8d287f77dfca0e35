from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Optional

import typer

from quick_cash.config import QUICK_CASH_STANDARD, load_config
from quick_cash.engine import QuickCashEngine
from quick_cash.errors import QuickCashError
from quick_cash.report import format_result
from quick_cash.runtime import configure_logging

app = typer.Typer(add_completion=False, help="Split a quick cash prize into spins and board combinations.")


@app.command()
def main(
    config_path: Optional[Path] = typer.Option(
        None, "--config", exists=True, dir_okay=False, help="JSON config (wager, basePrize, maxSpins, ...)."
    ),
    wager: Optional[int] = typer.Option(None, help="Override the configured wager."),
    prize: Optional[float] = typer.Option(None, help="Override the configured base prize."),
    seed: Optional[int] = typer.Option(None, help="Seed for a reproducible split."),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    log_level: str = typer.Option("WARNING", help="Log level for quick_cash loggers."),
) -> None:
    configure_logging(log_level)

    try:
        config = load_config(config_path) if config_path is not None else QUICK_CASH_STANDARD
        engine = QuickCashEngine(config, rng=random.Random(seed))
        result = engine.calculate_split(wager=wager, base_prize=prize)
    except QuickCashError as exc:
        typer.echo(f"[quick_cash] error: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        for line in format_result(result, engine.topology):
            typer.echo(line)

    if not result.passed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
