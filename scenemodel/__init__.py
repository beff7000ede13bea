"""Object relation trees, relations and topologies for learning scene models."""

__version__ = "0.1.0"