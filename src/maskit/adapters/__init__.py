"""Adapters – infrastructure implementations of maskit ports."""
