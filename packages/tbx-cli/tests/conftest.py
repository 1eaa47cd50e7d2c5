# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def toolbox_json() -> str:
    """A valid toolbox.cfg document."""
    return json.dumps(
        {
            "name": "emd",
            "title": "Empirical Mode Decomposition",
            "version": "1.2.3-beta+xyz",
            "url": "git@github.com:example/emd.git",
            "branch": "master",
            "paths": ["util"],
            "deps": [],
            "exclude": "tests",
            "uuid": "2f1e8f43-63a3-4a1f-8d1e-5f0b8f7e2a10",
        },
        indent=2,
    )
