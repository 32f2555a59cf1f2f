"""Command line entry point: fit a propensity model to a CSV file."""

from __future__ import annotations

import argparse
import logging
import sys
import time

from propensity import logit
from propensity.configurations import CfgBuilder
from propensity.models import Objective

logger = logging.getLogger("propensity")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="propensity",
        description=(
            "Fit a logistic regression to a CSV whose first column is the "
            "binary target."
        ),
    )
    parser.add_argument("path", help="CSV file with the target in the first column")
    parser.add_argument(
        "--headers", action="store_true", help="the first row is a header"
    )
    parser.add_argument(
        "--max-iters", type=int, default=100, help="maximum solver iterations"
    )
    parser.add_argument(
        "--logging", action="store_true", help="log every solver iteration"
    )
    parser.add_argument(
        "--sample", type=int, default=5, help="number of predictions to show"
    )
    return parser


def main(argv=None) -> int:
    """Run the fit and print its report; return the exit status."""
    args = _parser().parse_args(argv)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO)
    start = time.perf_counter()

    try:
        objective = Objective.from_csv(args.path, args.headers)
        cfg = CfgBuilder().max_iters(args.max_iters).logging(args.logging).build()
        findings = logit.run(objective, cfg)
        duration = time.perf_counter() - start
        report = findings.report()
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(report)
    y_hat = findings.predict(False)
    print(y_hat.show(args.sample))
    logger.info("Time elapsed in fitting is: %.6fs", duration)
    return 0


if __name__ == "__main__":
    sys.exit(main())