"""Validation and statistics helpers."""
