"""Domain layer - value objects, key scheme, repository interfaces."""
