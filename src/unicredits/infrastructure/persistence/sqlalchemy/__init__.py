"""SQLAlchemy persistence for UniCredits."""
