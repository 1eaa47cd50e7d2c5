# SPDX-License-Identifier: MIT
"""CLI configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from tbx_version import BumpPart


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


def _env_flag(env: Mapping[str, str], name: str) -> bool:
    value = env.get(name, "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean (true/false), got {env[name]!r}")


@dataclass
class CLIConfig:
    """CLI configuration.

    Attributes:
        default_bump: Part incremented by ``tbx bump`` when none is given
        color: Whether messages are colored
        json_indent: Indentation of JSON output, None for compact output
    """

    default_bump: BumpPart = BumpPart.PATCH
    color: bool = True
    json_indent: Optional[int] = 2

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "CLIConfig":
        """Create configuration from environment variables.

        Reads ``TBX_DEFAULT_BUMP``, ``TBX_NO_COLOR`` and ``TBX_JSON_INDENT``.

        Args:
            env: Mapping to read instead of ``os.environ``

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        if env is None:
            env = os.environ

        config = cls()

        if default_bump := env.get("TBX_DEFAULT_BUMP"):
            try:
                config.default_bump = BumpPart(default_bump.strip().lower())
            except ValueError as e:
                allowed = ", ".join(p.value for p in BumpPart)
                raise ConfigError(
                    f"TBX_DEFAULT_BUMP must be one of: {allowed}, got {default_bump!r}"
                ) from e

        config.color = not _env_flag(env, "TBX_NO_COLOR")

        if (indent := env.get("TBX_JSON_INDENT")) is not None:
            indent = indent.strip()
            if indent.lower() in ("", "none"):
                config.json_indent = None
            elif indent.isdigit():
                config.json_indent = int(indent)
            else:
                raise ConfigError(f"TBX_JSON_INDENT must be a non-negative integer, got {indent!r}")

        return config


def load_config() -> CLIConfig:
    """Load CLI configuration from the environment."""
    return CLIConfig.from_env()
