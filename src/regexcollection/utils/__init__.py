"""Shared helpers: errors, logging and span utilities."""
