# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import version, info

__all__ = ["version", "info"]
