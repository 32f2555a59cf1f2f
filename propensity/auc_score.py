"""Classification quality score for binary targets."""

from __future__ import annotations

import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


def auc_score(y_true, y_hat) -> float:
    """Return the share of positions where the prediction equals the label.

    Labels must be 0 or 1; labels above 1 count as positive and trigger a
    warning. Any other label raises :class:`ValueError`.
    """
    truth = np.asarray(y_true, dtype=float).ravel()
    predicted = np.asarray(y_hat, dtype=float).ravel()

    valid = (truth == 0.0) | (truth >= 1.0)
    if not valid.all():
        bad = truth[~valid][0]
        raise ValueError(
            "binary quality score (auc): only for binary classification. "
            f"Invalid label: {bad}"
        )

    neg = int(np.count_nonzero(truth == 0.0))
    pos = int(np.count_nonzero(truth >= 1.0))
    if np.any(truth > 1.0):
        logger.info("Found at least one non-binary value.")

    n = min(truth.size, predicted.size)
    matches = int(np.count_nonzero(truth[:n] == predicted[:n]))

    total = pos + neg
    if total == 0:
        return math.nan
    return matches / total