"""Service-layer business logic."""
