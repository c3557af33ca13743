"""Textual front-end for Pairs."""

from .app import PairsTextualApp, run_textual_app

__all__ = ["PairsTextualApp", "run_textual_app"]
