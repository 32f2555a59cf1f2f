import math

import numpy as np
import pytest

from propensity import logit
from propensity.configurations import CfgBuilder
from propensity.models import Objective


def _objective(seed=0, n=200):
    rng = np.random.default_rng(seed)
    features = rng.normal(size=(n, 2))
    true_w = np.array([1.5, -2.0])
    prob = 1.0 / (1.0 + np.exp(-(features @ true_w + 0.3)))
    y = (rng.random(n) < prob).astype(float)
    x = np.column_stack([features, np.ones(n)])
    return Objective(x, y)


def test_cost_at_zero_is_n_log_two():
    obj = _objective(n=50)
    assert logit.cost(obj, np.zeros(3)) == pytest.approx(50 * math.log(2.0))


def test_gradient_matches_finite_differences():
    obj = _objective(seed=1, n=60)
    w = np.array([0.2, -0.1, 0.05])
    g = logit.gradient(obj, w)
    h = 1e-6
    numeric = np.array(
        [
            (logit.cost(obj, w + h * e) - logit.cost(obj, w - h * e)) / (2 * h)
            for e in np.eye(3)
        ]
    )
    np.testing.assert_allclose(g, numeric, rtol=1e-4, atol=1e-5)


def test_param_length_mismatch_raises():
    obj = _objective(n=10)
    with pytest.raises(ValueError):
        logit.cost(obj, np.zeros(2))
    with pytest.raises(ValueError):
        logit.gradient(obj, np.zeros(4))


def test_run_splits_parameters():
    obj = _objective()
    findings = logit.run(obj, CfgBuilder().build())
    assert findings.all_betas.shape == (3,)
    np.testing.assert_array_equal(findings.coefficients, findings.all_betas[:2])
    assert findings.intercept == findings.all_betas[2]
    assert findings.objective is obj


def test_run_reduces_cost_and_reaches_stationary_point():
    obj = _objective(seed=2)
    findings = logit.run(obj, CfgBuilder().max_iters(100).build())
    assert logit.cost(obj, findings.all_betas) < logit.cost(obj, np.zeros(3))
    assert np.linalg.norm(logit.gradient(obj, findings.all_betas)) < 1e-3


def test_run_recovers_signs_of_true_weights():
    obj = _objective(seed=3, n=500)
    findings = logit.run(obj, CfgBuilder().build())
    assert findings.coefficients[0] > 0
    assert findings.coefficients[1] < 0


def test_zero_iterations_keeps_initial_parameters():
    obj = _objective(n=20)
    findings = logit.run(obj, CfgBuilder().max_iters(0).build())
    np.testing.assert_array_equal(findings.all_betas, np.zeros(3))


def test_predictions_better_than_chance():
    obj = _objective(seed=4, n=400)
    findings = logit.run(obj, CfgBuilder().logging(True).build())
    labels = np.asarray(findings.predict(True))
    assert np.mean(labels == obj.y) > 0.7