"""Infrastructure layer - config loading and content sources."""
