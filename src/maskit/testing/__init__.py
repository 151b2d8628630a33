"""Testing helpers – fakes and property-based strategies for maskit users."""
from maskit.testing.fakes import InMemoryMaskStore

__all__ = ["InMemoryMaskStore"]
