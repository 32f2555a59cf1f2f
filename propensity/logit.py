"""Logistic regression fitted by L-BFGS with a backtracking line search."""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Tuple

import numpy as np

from propensity.configurations import Cfg
from propensity.models import Findings, Objective, sigmoid

logger = logging.getLogger(__name__)

_HISTORY = 7
_ARMIJO_C = 0.5
_RHO = 0.9
_MAX_BACKTRACKS = 200
_TOL_GRAD = float(np.sqrt(np.finfo(float).eps))
_TOL_COST = float(np.finfo(float).eps)


def _as_param(objective: Objective, param) -> np.ndarray:
    ws = np.asarray(param, dtype=float).ravel()
    if ws.size != objective.feature_count():
        raise ValueError(
            f"feature count {objective.feature_count()} does not match "
            f"parameter length {ws.size}"
        )
    return ws


def cost(objective: Objective, param) -> float:
    """Negative log-likelihood of the target under the given parameters."""
    ws = _as_param(objective, param)
    y_hat = np.asarray(sigmoid(objective.x @ ws), dtype=float)
    y = objective.y
    with np.errstate(divide="ignore", invalid="ignore"):
        terms = y * np.log(y_hat) + (1.0 - y) * np.log(1.0 - y_hat)
    return float(-terms.sum())


def gradient(objective: Objective, param) -> np.ndarray:
    """Gradient of :func:`cost` with respect to the parameters."""
    ws = _as_param(objective, param)
    residual = np.asarray(sigmoid(objective.x @ ws), dtype=float) - objective.y
    return objective.x.T @ residual


def _direction(
    g: np.ndarray, pairs: Deque[Tuple[np.ndarray, np.ndarray]]
) -> np.ndarray:
    """Two-loop recursion: approximate inverse Hessian applied to ``-g``."""
    q = g.copy()
    alphas = []
    for s, yv in reversed(pairs):
        rho_i = 1.0 / (yv @ s)
        a = rho_i * (s @ q)
        q -= a * yv
        alphas.append((rho_i, a))
    if pairs:
        s_last, y_last = pairs[-1]
        gamma = (s_last @ y_last) / (y_last @ y_last)
    else:
        gamma = 1.0
    r = gamma * q
    for (s, yv), (rho_i, a) in zip(pairs, reversed(alphas)):
        b = rho_i * (yv @ r)
        r += s * (a - b)
    return -r


def _minimise(
    objective: Objective, init: np.ndarray, max_iters: int, verbose: bool
) -> np.ndarray:
    x = init.copy()
    f = cost(objective, x)
    g = gradient(objective, x)
    best_x, best_f = x.copy(), f
    pairs: Deque[Tuple[np.ndarray, np.ndarray]] = deque(maxlen=_HISTORY)

    for iteration in range(max_iters):
        if np.linalg.norm(g) < _TOL_GRAD:
            break
        d = _direction(g, pairs)
        slope = float(g @ d)
        if not np.isfinite(slope) or slope >= 0.0:
            d = -g
            slope = float(-(g @ g))

        alpha = 1.0
        for _ in range(_MAX_BACKTRACKS):
            x_new = x + alpha * d
            f_new = cost(objective, x_new)
            if f_new <= f + _ARMIJO_C * alpha * slope:
                break
            alpha *= _RHO
        else:
            logger.info("line search found no acceptable step; stopping")
            break

        g_new = gradient(objective, x_new)
        s = x_new - x
        yv = g_new - g
        if yv @ s > 1e-12:
            pairs.append((s, yv))

        previous = f
        x, f, g = x_new, f_new, g_new
        if f < best_f:
            best_x, best_f = x.copy(), f
        if verbose:
            logger.info(
                "iter %d: cost %.10g, step %.4g, grad norm %.4g",
                iteration + 1,
                f,
                alpha,
                float(np.linalg.norm(g)),
            )
        if abs(previous - f) < _TOL_COST:
            break

    return best_x


def run(objective: Objective, cfg: Cfg) -> Findings:
    """Fit the logistic model and return its findings."""
    p = objective.feature_count()
    logger.info("Running the optimization with feature count: %d", p)
    if p < 1:
        raise ValueError("the objective has no features")

    w = _minimise(objective, np.zeros(p), cfg.max_iters, cfg.logging)
    logger.info("shape: (%d, 1)", w.size)

    return Findings(
        all_betas=w.copy(),
        coefficients=w[: p - 1].copy(),
        intercept=float(w[p - 1]),
        objective=objective,
    )