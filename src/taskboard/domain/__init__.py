"""Domain layer: aggregates, repository interfaces and domain exceptions."""
