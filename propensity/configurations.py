"""Configuration for the optimisation process."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class CfgPredict:
    """Settings for producing predictions."""

    binary_output: bool = False


@dataclass
class Cfg:
    """Settings for a single optimisation run."""

    max_iters: int = 100
    logging: bool = False
    cfg_predict: Optional[CfgPredict] = field(default=None)


class CfgBuilder:
    """Fluent builder for :class:`Cfg`."""

    def __init__(self) -> None:
        self._max_iters = 100
        self._logging = False
        self._cfg_predict: Optional[CfgPredict] = None

    def max_iters(self, max_iters: int) -> "CfgBuilder":
        """Set the maximum number of solver iterations."""
        self._max_iters = max_iters
        return self

    def logging(self, logging: bool) -> "CfgBuilder":
        """Turn per-iteration solver logging on or off."""
        self._logging = logging
        return self

    def with_predict(self, cfg_predict: CfgPredict) -> "CfgBuilder":
        """Attach prediction settings."""
        self._cfg_predict = cfg_predict
        return self

    def build(self) -> Cfg:
        """Produce the configured :class:`Cfg`."""
        return Cfg(
            max_iters=self._max_iters,
            logging=self._logging,
            cfg_predict=self._cfg_predict,
        )