"""Replay configuration.

Pure configuration data. Defaults reproduce the reference behaviour: abort on
the first record that fails decoding, log warnings and above.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import final

ENV_PREFIX: str = "TXLEDGER_"

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@final
@dataclass(frozen=True, slots=True)
class ReplayConfig:
    """How a transaction log is replayed.

    strict: a record that fails decoding aborts the replay. When False the
            record is logged at WARNING and skipped.
    log_level: threshold for the txledger logger.
    """

    strict: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.log_level not in LOG_LEVELS:
            raise TypeError(
                f"ReplayConfig.log_level must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> ReplayConfig:
        """Build from TXLEDGER_STRICT and TXLEDGER_LOG_LEVEL; unset keys keep defaults.

        Raises TypeError on values that cannot be interpreted.
        """
        env = os.environ if environ is None else environ
        defaults = ReplayConfig()

        strict = defaults.strict
        raw_strict = env.get(f"{ENV_PREFIX}STRICT")
        if raw_strict is not None:
            value = raw_strict.strip().lower()
            if value in _TRUE_VALUES:
                strict = True
            elif value in _FALSE_VALUES:
                strict = False
            else:
                raise TypeError(f"{ENV_PREFIX}STRICT must be a boolean, got {raw_strict!r}")

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).strip().upper()
        return ReplayConfig(strict=strict, log_level=log_level)
