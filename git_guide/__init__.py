"""Guided conventional commit message builder."""
