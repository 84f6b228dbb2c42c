"""
engine.docwrite-guard.tests.conftest

Purpose:
    Local pytest fixtures for docwrite-guard engine tests.
"""

from __future__ import annotations

import logging

import pytest

from docwrite_guard import SafeWriteAdapter, ValidationOptions


@pytest.fixture()
def options_factory():
    """
    Factory fixture for ValidationOptions with keyword overrides (snake_case or camelCase).
    """

    def _make(**overrides) -> ValidationOptions:
        return ValidationOptions.from_config(overrides)

    return _make


@pytest.fixture()
def adapter_factory():
    def _make(path: str = "jobs/123", **overrides) -> SafeWriteAdapter:
        return SafeWriteAdapter(path, ValidationOptions.from_config(overrides))

    return _make


@pytest.fixture()
def guard_caplog(caplog):
    """caplog capturing DEBUG and above from the docwrite_guard namespace."""
    caplog.set_level(logging.DEBUG, logger="docwrite_guard")
    return caplog
