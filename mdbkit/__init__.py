"""Helpers for SQL search arguments, output formatting, query rebuilding and code generation around Access database content."""

__version__ = "0.1.0"