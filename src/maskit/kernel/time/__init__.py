"""Kernel time – clock port used to stamp persisted masks."""
from maskit.kernel.time.clock import Clock, FrozenClock, SystemClock, utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "utc_now"]
