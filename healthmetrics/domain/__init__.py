"""Domain layer: bounded contexts of the metrics engine."""
