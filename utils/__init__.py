"""Geometry helpers and clustering algorithms."""
