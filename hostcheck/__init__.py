"""Appliance host check for backup and restore tooling."""

__version__ = "3.6.0"
