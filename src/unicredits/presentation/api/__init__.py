"""FastAPI application for UniCredits."""
