"""Core model of the bounded context."""
