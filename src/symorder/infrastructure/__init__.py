"""Adapters for structure files and census tables."""
