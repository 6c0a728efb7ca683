"""Infrastructure layer - stores, configuration, observability."""
