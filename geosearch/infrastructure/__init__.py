"""Infrastructure layer: adapters for external search providers."""
