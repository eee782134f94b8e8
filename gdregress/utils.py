"""Small numeric helpers: vector formatting and mean squared error."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence, TextIO


def format_vector(values: Iterable[float], label: str | None = None) -> str:
    """Render values as ``label[v1, v2, ...]`` with six decimals each."""
    body = ", ".join(f"{value:.6f}" for value in values)
    return f"{label or ''}[{body}]"


def print_vector(
    values: Iterable[float], label: str | None = None, file: TextIO | None = None
) -> None:
    """Write the formatted vector and a newline to ``file`` (stdout by default)."""
    print(format_vector(values, label), file=file if file is not None else sys.stdout)


def mse(predictions: Sequence[float], targets: Sequence[float]) -> float:
    """Mean squared error; 0.0 for empty input."""
    if len(predictions) != len(targets):
        raise ValueError("predictions and targets differ in length")
    if not predictions:
        return 0.0
    total = 0.0
    for predicted, target in zip(predictions, targets):
        diff = predicted - target
        total += diff * diff
    return total / len(predictions)