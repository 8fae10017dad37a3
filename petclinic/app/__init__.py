"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``models`` (domain entities), ``services`` (the storage
service contract and its in‑memory and SQLite implementations),
``repositories`` (SQLite access), ``schemas`` (API payloads) and
``api`` (versioned routers).
"""

from .main import app  # noqa: F401
