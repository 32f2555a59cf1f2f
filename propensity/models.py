"""Objective, findings and predictions of a logistic regression."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from typing import List, Union

import numpy as np

from propensity import matrix_csv
from propensity.auc_score import auc_score

logger = logging.getLogger(__name__)

_RULE = "-----------------------------------"


def sigmoid(v):
    """Logistic function clamped to 0 below -40 and to 1 above 40.

    Accepts a scalar (returns ``float``) or an array (returns an array).
    """
    arr = np.asarray(v, dtype=float)
    core = 1.0 / (1.0 + np.exp(-np.clip(arr, -40.0, 40.0)))
    result = np.where(arr < -40.0, 0.0, np.where(arr > 40.0, 1.0, core))
    if result.ndim == 0:
        return float(result)
    return result


def _row_major(data, rows: int) -> np.ndarray:
    flat = np.asarray(data, dtype=float).ravel()
    if rows <= 0:
        raise ValueError("row count must be positive")
    if flat.size % rows:
        raise ValueError(
            f"{flat.size} values cannot be split into {rows} equal rows"
        )
    return flat.reshape(rows, flat.size // rows)


@dataclass(eq=False)
class Objective:
    """Features ``x`` (with a trailing intercept column) and binary target ``y``."""

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        self.x = np.asarray(self.x, dtype=float)
        self.y = np.asarray(self.y, dtype=float).ravel()
        if self.x.ndim != 2:
            raise ValueError("x must be a two-dimensional matrix")

    def __str__(self) -> str:
        rows, cols = self.x.shape
        return (
            f"Objective with x matrix {rows} x {cols} "
            f"and y vector length {self.y.size}"
        )

    def __repr__(self) -> str:
        return f"Objective(x={self.x.shape}, y={self.y.size})"

    @classmethod
    def from_csv(
        cls, path: Union[str, "os.PathLike[str]"], with_headers: bool
    ) -> "Objective":
        """Load a CSV with the target first; an intercept column is appended."""
        staged, num_records = matrix_csv.from_csv(path, with_headers)
        if num_records == 0:
            raise ValueError("the file holds no records")
        return cls.from_matrix(_row_major(staged, num_records))

    @classmethod
    def from_vec(cls, data, rows: int) -> "Objective":
        """Build from row-major data with the target in the first column."""
        return cls.from_matrix(_row_major(data, rows))

    @classmethod
    def from_vecs(cls, x, y, rows: int) -> "Objective":
        """Build from row-major features and a separate target vector."""
        return cls(_row_major(x, rows), np.asarray(y, dtype=float))

    @classmethod
    def from_matrix(cls, matrix) -> "Objective":
        """Split a matrix whose first column is the binary target."""
        m = np.asarray(matrix, dtype=float)
        if m.ndim != 2 or m.shape[1] < 1:
            raise ValueError("matrix must be two-dimensional with a target column")
        y = m[:, 0].copy()
        x = m[:, 1:].copy()
        if y.size == 0 or not (y.min() == 0.0 and y.max() == 1.0):
            raise ValueError("target column must span exactly 0 to 1")
        return cls(x, y)

    def feature_count(self) -> int:
        """Number of columns of ``x``, intercept included."""
        return int(self.x.shape[1])


class Prediction(Sequence):
    """Predicted values for each record of an objective."""

    def __init__(self, values) -> None:
        self._values = np.array(values, dtype=float).ravel()

    @property
    def values(self) -> np.ndarray:
        return self._values

    def __len__(self) -> int:
        return int(self._values.size)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Prediction(self._values[index])
        return float(self._values[index])

    def __array__(self, dtype=None, copy=None):
        return self._values if dtype is None else self._values.astype(dtype)

    def __repr__(self) -> str:
        return f"Prediction({self.to_list()!r})"

    def to_list(self) -> List[float]:
        return [float(v) for v in self._values]

    def show(self, sample: int) -> str:
        """Log the first ``sample`` predictions and return the message."""
        head = [float(v) for v in self._values[:sample]]
        message = f"\n{_RULE}\npredictions: {head}\n{_RULE}\n"
        logger.info("%s", message)
        return message


@dataclass(eq=False)
class Findings:
    """Fitted parameters together with the objective they were fitted on."""

    all_betas: np.ndarray
    coefficients: np.ndarray
    intercept: float
    objective: Objective

    def __post_init__(self) -> None:
        self.all_betas = np.asarray(self.all_betas, dtype=float).ravel()
        self.coefficients = np.asarray(self.coefficients, dtype=float).ravel()
        self.intercept = float(self.intercept)

    def report(self) -> str:
        """Summarise the fit, including the accuracy of binary predictions."""
        score = auc_score(self.objective.y, self.predict(True))
        coefficients = [float(c) for c in self.coefficients]
        return (
            f"\n{_RULE}\n"
            f"features: {self.objective.feature_count()}\n"
            f"records: {self.objective.x.shape[0]}\n"
            f"coefficients: {coefficients}\n"
            f"intercept: {self.intercept}\n"
            f"AUC score: {score}\n"
            f"{_RULE}\n"
        )

    def predict(self, binary: bool) -> Prediction:
        """Predict probabilities, or 0/1 labels when ``binary`` is true."""
        raw = self.objective.x @ self.all_betas
        logger.debug(
            "coeff len: %d, row width: %d",
            self.all_betas.size,
            self.objective.x.shape[1],
        )
        if binary:
            y_hat = np.where(np.asarray(sigmoid(raw)) > 0.5, 1.0, 0.0)
        else:
            with np.errstate(over="ignore", invalid="ignore"):
                e = np.exp(raw)
                y_hat = e / (e + 1.0)
        return Prediction(y_hat)