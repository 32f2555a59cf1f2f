"""Propensity scores from a logistic regression fitted with L-BFGS."""

__version__ = "0.1.0"

__all__ = ["auc_score", "cli", "configurations", "logit", "matrix_csv", "models"]