"""Observability – structured logging with parameter filtering."""
