"""Commands - write operations on the current user's data."""
