"""Eloquent model generator for existing database schemas."""

__version__ = "0.1.0"
