"""Utility toolkit: string and time helpers, resource pools, INI data, error codes and MySQL helpers."""

__version__ = "0.1.0"