"""Helpers for container-based network labs: topology generation, hosts entries, container summaries and exec results."""

__version__ = "0.1.0"