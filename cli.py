#!/usr/bin/env python3
"""Unified CLI for Contracting Management.

Usage:
    python cli.py serve --help
    python cli.py dashboard --help

Examples:
    python cli.py serve --port 4000
    python cli.py serve --config config/contracting.yml --reload
    python cli.py dashboard --url http://localhost:4000/api
"""
from contracting.cli import main


if __name__ == '__main__':
    main()
