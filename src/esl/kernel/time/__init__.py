"""Kernel time – Clock port + implementations."""
from esl.kernel.time.clock import Clock, FrozenClock, SystemClock, unix_time

__all__ = ["Clock", "FrozenClock", "SystemClock", "unix_time"]
