"""Thread-safe in-process metrics, a registry of them and a periodic file writer."""

__version__ = "0.1.0"