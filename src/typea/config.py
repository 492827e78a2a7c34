"""Validator configuration resolved from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from typea.types import Mode

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass
class ValidatorConfig:
    """Settings for command-line and service use of the validator.

    Attributes:
        mode: Validation mode used when none is given explicitly
        reject_extra_items: Fail positional arrays that carry extra elements
        log_level: Logging level name for the CLI
    """

    mode: Mode = Mode.DEFAULT
    reject_extra_items: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ValidatorConfig:
        """Create config from environment variables.

        - TYPEA_MODE: default | strict | loose
        - TYPEA_REJECT_EXTRA_ITEMS: 1/true/yes/on or 0/false/no/off
        - TYPEA_LOG_LEVEL: a logging level name, e.g. DEBUG

        Raises:
            ValueError: If a variable holds an unrecognized value
        """
        env = os.environ if environ is None else environ

        mode_value = env.get("TYPEA_MODE", Mode.DEFAULT.value).strip().lower()
        try:
            mode = Mode(mode_value)
        except ValueError:
            choices = ", ".join(m.value for m in Mode)
            raise ValueError(f"TYPEA_MODE must be one of: {choices} (got '{mode_value}')") from None

        flag = env.get("TYPEA_REJECT_EXTRA_ITEMS", "").strip().lower()
        if flag in _TRUE_VALUES:
            reject_extra_items = True
        elif flag in _FALSE_VALUES:
            reject_extra_items = False
        else:
            raise ValueError(f"TYPEA_REJECT_EXTRA_ITEMS must be a boolean (got '{flag}')")

        log_level = env.get("TYPEA_LOG_LEVEL", "WARNING").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ValueError(f"TYPEA_LOG_LEVEL must be a logging level name (got '{log_level}')")

        return cls(mode=mode, reject_extra_items=reject_extra_items, log_level=log_level)
