"""Slot reservation service: query and atomically claim hourly appointment slots."""

__version__ = "0.1.0"
