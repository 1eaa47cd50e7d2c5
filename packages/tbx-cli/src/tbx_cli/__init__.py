# SPDX-License-Identifier: MIT
"""Command-line interface for semantic versions and toolbox records."""

__version__ = "0.1.0"
