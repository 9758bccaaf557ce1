"""Calculator configuration with environment overrides."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from treecalc.exceptions import ParseError
from treecalc.validators import MAX_DIGITS, MAX_MAGNITUDE, validate_number

ENV_PREFIX = "TREECALC_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CalculatorConfig:
    """Settings shared by the engine and the console shell."""

    initial_value: float = 0.0
    max_digits: int = MAX_DIGITS
    max_magnitude: float = MAX_MAGNITUDE
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CalculatorConfig:
        """
        Build a config from ``TREECALC_*`` environment variables.

        Recognised: TREECALC_INITIAL_VALUE, TREECALC_MAX_DIGITS, TREECALC_LOG_LEVEL.

        Raises:
            ParseError: If a variable holds a malformed value
            OutOfBoundsError: If the initial value is NaN or infinite
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        initial_value = defaults.initial_value
        raw = env.get(f"{ENV_PREFIX}INITIAL_VALUE")
        if raw is not None:
            try:
                initial_value = float(raw)
            except ValueError as e:
                raise ParseError(f"Parse error: {e}") from e
            validate_number(initial_value)

        max_digits = defaults.max_digits
        raw = env.get(f"{ENV_PREFIX}MAX_DIGITS")
        if raw is not None:
            try:
                max_digits = int(raw)
            except ValueError as e:
                raise ParseError(f"Parse error: {e}") from e

        log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ParseError(f"Unknown log level, expected one of {', '.join(LOG_LEVELS)}", log_level)

        return cls(initial_value=initial_value, max_digits=max_digits, log_level=log_level)
