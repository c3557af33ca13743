"""Sanity tests ensuring the package modules import correctly."""

from __future__ import annotations

import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "pairs",
        "pairs.cards",
        "pairs.deck",
        "pairs.layout",
        "pairs.board",
        "pairs.session",
        "pairs.cli.main",
        "pairs.cli.textual",
    ],
)
def test_modules_import(module_name: str) -> None:
    """Ensure all foundational modules can be imported."""

    assert importlib.import_module(module_name)
