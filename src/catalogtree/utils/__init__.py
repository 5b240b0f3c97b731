"""Shared helpers for catalogtree."""
