"""Helpers for printer commands and device naming."""
