"""Ranking page fetchers."""
