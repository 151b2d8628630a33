"""Observability – structured logging for maskit."""
