"""Contracting Management - clients, projects, statements and site resources."""

__version__ = "0.1.0"
