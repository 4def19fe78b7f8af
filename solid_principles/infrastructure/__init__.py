"""Infrastructure layer: logging, dependency injection and variant registries."""
