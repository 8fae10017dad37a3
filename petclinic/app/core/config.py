"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application starts with the in‑memory storage profile and sample data
when nothing is configured.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent

MAP_PROFILE = "map"
JPA_PROFILE = "springdatajpa"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pet Clinic API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Storage profile selecting which service implementations are wired
    # at startup.  ``map`` (or empty) keeps everything in memory,
    # ``springdatajpa`` persists records in the SQLite database below.
    active_profile: str = os.getenv("ACTIVE_PROFILE", MAP_PROFILE)

    # Path to the SQLite database used by the relational profile.  A
    # relative path is resolved against the project root by ``db``.
    database_url: str = os.getenv("DATABASE_URL", "petclinic.db")

    # Seed pet types, specialties, owners and vets on startup when the
    # store is empty.
    load_sample_data: bool = os.getenv("LOAD_SAMPLE_DATA", "true").lower() in {"1", "true", "yes"}


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()


def resolve_path(value: str) -> Path:
    """Return ``value`` as an absolute path, relative ones under ``PROJECT_ROOT``."""
    path = Path(value)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path.resolve()
