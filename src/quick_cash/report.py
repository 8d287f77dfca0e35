"""Plain-text rendering of payout results for logs and the CLI."""

from __future__ import annotations

EMPTY_CELL = "."


def format_frame_splits(spin, size: int) -> str:
    """Render every board index with its value, empty cells as ``""``."""

    board = spin.board()
    return ", ".join(
        f'[{index}, "{board[index] if index in board else ""}"]' for index in range(size)
    )


def format_board(spin, topology) -> list[str]:
    """Render one spin as grid rows of ``<color>:<value>`` cells."""

    labels = {}
    for combination in spin.combinations:
        for cell in combination.cells:
            labels[cell.index] = f"{cell.color.value}:{cell.value}"

    width = max([len(label) for label in labels.values()] + [len(EMPTY_CELL)])
    rows = []
    for row in range(topology.rows):
        cells = [
            labels.get(topology.index_of(row, column), EMPTY_CELL).rjust(width)
            for column in range(topology.columns)
        ]
        rows.append(" ".join(cells))
    return rows


def format_spin_summary(spin_number: int, spin) -> str:
    parts = [
        f"{combination.color.value}={combination.total_value}x{len(combination.cells)}"
        for combination in spin.combinations
    ]
    return f"Spin {spin_number}: {spin.spin_value} ({', '.join(parts)})"


def format_result(result, topology) -> list[str]:
    lines = [
        f"Wager: {result.wager}, Base Prize: {result.base_prize}, "
        f"Rounded Prize: {result.rounded_prize}, Spins: {result.spin_count}, "
        f"Coin Range: {result.coin_range[0]}-{result.coin_range[1]}"
    ]
    for spin_number, spin in enumerate(result.spins, start=1):
        lines.append("")
        lines.append(format_spin_summary(spin_number, spin))
        lines.extend(format_board(spin, topology))

    if result.validation is not None:
        lines.append("")
        failures = result.validation.failures
        if failures:
            lines.extend(check.describe() for check in failures)
        else:
            lines.append(f"Validation: all {len(result.validation.checks)} checks passed")

    for warning in result.warnings:
        lines.append(f"warning: {warning}")
    return lines


__all__ = [
    "format_frame_splits",
    "format_board",
    "format_spin_summary",
    "format_result",
]
