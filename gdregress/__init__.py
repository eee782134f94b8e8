"""Linear regression trained by batch gradient descent on numeric CSV data."""

__version__ = "0.1.0"