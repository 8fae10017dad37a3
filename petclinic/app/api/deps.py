"""Shared FastAPI dependencies."""

from fastapi import Request

from ..services.registry import ClinicServices


def get_services(request: Request) -> ClinicServices:
    """Return the storage services wired into the application at startup."""
    return request.app.state.services
