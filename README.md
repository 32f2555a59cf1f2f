# propensity

Fit a logistic regression to a binary target and turn it into propensity
scores. The model is fitted by minimising the negative log-likelihood with an
L-BFGS solver (history of 7 pairs) and a backtracking Armijo line search,
starting from all-zero weights. The best parameters seen are returned.

## Data layout

Input is a dense numeric matrix, one record per row:

- the **first column** is the binary target; its values must span exactly
  0 to 1;
- the remaining columns are the features;
- when reading CSV, a constant `1.0` is appended to every record as the
  intercept column. The last fitted weight is the intercept.

Every CSV record must have as many fields as the first row; otherwise a
`ValueError` is raised.

## Installing

```
pip install .
```

## Command line

```
propensity path/to/data.csv
```

Options:

- `--headers`: the first row of the file is a header and is skipped;
- `--max-iters N`: maximum solver iterations (default 100);
- `--logging`: log the cost, step and gradient norm of every iteration;
- `--sample N`: number of predicted probabilities to show (default 5).

The command fits the model, prints a report (feature count, record count,
coefficients, intercept and accuracy score) and prints the first predicted
probabilities. The elapsed fitting time is logged. If the file cannot be read
or its contents are invalid, it prints `error: ...` to standard error and
exits with status 1.

## Library use

```python
from propensity import logit
from propensity.configurations import CfgBuilder
from propensity.models import Objective

objective = Objective.from_csv("data.csv", False)
cfg = CfgBuilder().max_iters(100).logging(False).build()

findings = logit.run(objective, cfg)
print(findings.report())

probabilities = findings.predict(False)
probabilities.show(5)
labels = findings.predict(True).to_list()
```

An `Objective` holds the features `x` and target `y`. Besides `from_csv`, it
can be built from memory:

- `Objective.from_vec(data, rows)`: a flat row-major list with the target in
  the first column;
- `Objective.from_vecs(x, y, rows)`: features and target given separately;
- `Objective.from_matrix(matrix)`: a two-dimensional array with the target in
  the first column.

`Objective.from_vec` and `Objective.from_matrix` do not add an intercept
column; include one yourself if you want an intercept.

`logit.cost(objective, param)` and `logit.gradient(objective, param)` give the
negative log-likelihood and its gradient for a parameter vector.

`Findings` carries `all_betas`, `coefficients`, `intercept` and the
`objective`. `Findings.predict(binary)` returns a `Prediction`, a read-only
sequence of floats with `values`, `to_list()` and `show(sample)` (which logs
and returns a short message with the first values).

`propensity.auc_score.auc_score(y_true, y_hat)` gives the share of records
whose predicted label equals the true one. Labels must be 0 or 1; labels above
1 count as positive and are logged; any other label raises `ValueError`.

The `Cfg` built by `CfgBuilder` also accepts a `CfgPredict` through
`with_predict`; `logit.run` uses only `max_iters` and `logging`.

## What it does not do

The package fits and scores one data set in memory. It does not save or load
fitted models, keep feature names, predict on new data apart from the fitted
objective, or compute standard errors or other statistics of the coefficients.

## Running the tests

```
pip install .[test]
pytest
```