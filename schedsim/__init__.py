"""Round-robin process scheduling simulator: process records, queues, scheduler and command."""

__version__ = "0.1.0"
__all__ = ["__version__"]