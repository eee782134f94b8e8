"""Batch gradient descent for linear regression."""

from __future__ import annotations

from .csv_reader import CSVData
from .linear_regression import LinearRegression


def gradient_descent(
    model: LinearRegression, data: CSVData, alpha: float, iterations: int
) -> None:
    """Fit ``model`` to ``data`` in place.

    The last column of ``data`` is the target; a bias term is added
    automatically, so ``model.n_features`` must equal ``data.cols``.
    """
    if data.rows == 0 or data.cols < 2 or alpha <= 0.0 or iterations <= 0:
        raise ValueError("invalid parameters")
    if model.n_features != data.cols:
        raise ValueError("model feature count mismatch")

    step = alpha / data.rows
    theta = model.theta
    for _ in range(iterations):
        gradients = [0.0] * model.n_features
        for *features, target in data:
            prediction = theta[0]
            for weight, value in zip(theta[1:], features):
                prediction += weight * value
            error = prediction - target
            gradients[0] += error
            for j, value in enumerate(features, start=1):
                gradients[j] += error * value
        theta[:] = [t - step * g for t, g in zip(theta, gradients)]