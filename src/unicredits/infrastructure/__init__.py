"""Infrastructure layer: persistence and outbound email."""
