"""CPU scheduling simulator with FCFS, SJF, priority and round-robin policies."""

__version__ = "0.1.0"
__all__ = ["cli", "cpu", "driver", "schedulers", "task"]