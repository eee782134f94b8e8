"""Linear regression model with a bias term."""

from __future__ import annotations

from typing import Sequence


class LinearRegression:
    """Parameters ``theta`` of a linear model; ``theta[0]`` is the bias.

    For data with F input features the model has F + 1 parameters.
    """

    def __init__(self, n_features: int) -> None:
        if n_features <= 0:
            raise ValueError("n_features must be > 0")
        self.theta: list[float] = [0.0] * n_features

    @property
    def n_features(self) -> int:
        """Number of parameters, bias included."""
        return len(self.theta)

    def predict(self, features: Sequence[float]) -> float:
        """Predict from the first ``n_features - 1`` values of ``features``.

        Extra trailing values (such as a target column) are ignored.
        """
        needed = self.n_features - 1
        if len(features) < needed:
            raise ValueError(f"expected at least {needed} features, got {len(features)}")
        result = self.theta[0]
        for weight, value in zip(self.theta[1:], features):
            result += weight * value
        return result

    def __repr__(self) -> str:
        return f"LinearRegression(theta={self.theta!r})"