"""Queries - read operations on the current user's data."""
