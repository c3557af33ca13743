"""Command line interface for Pairs."""
