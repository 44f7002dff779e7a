"""Command line interface for UniCredits."""
