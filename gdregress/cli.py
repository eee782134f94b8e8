"""Command line entry: train a linear model on a CSV file and report the fit."""

from __future__ import annotations

import sys
from typing import Sequence

from .csv_reader import CSVError, read_csv
from .gradient_descent import gradient_descent
from .linear_regression import LinearRegression
from .utils import mse, print_vector

LEARNING_RATE = 0.01
ITERATIONS = 1000


def main(argv: Sequence[str] | None = None) -> int:
    """Run the trainer; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: gdregress <csv_file>", file=sys.stderr)
        return 1
    csv_file = args[0]

    try:
        data = read_csv(csv_file)
    except CSVError as exc:
        print(f"csv_read: {exc}", file=sys.stderr)
        print(f"Error: Failed to read CSV file '{csv_file}'", file=sys.stderr)
        return 1

    if data.cols < 2:
        print(
            "Error: CSV must have at least one feature and one target column",
            file=sys.stderr,
        )
        return 1

    model = LinearRegression(data.cols)
    try:
        gradient_descent(model, data, LEARNING_RATE, ITERATIONS)
    except ValueError as exc:
        print(f"gradient_descent: {exc}", file=sys.stderr)
        print("Error: Gradient descent failed", file=sys.stderr)
        return 1

    print_vector(model.theta, "Final parameters: ")

    predictions = [model.predict(row) for row in data]
    targets = [row[-1] for row in data]
    print(f"Training MSE: {mse(predictions, targets):.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())