"""
Exception types raised by the service layer.

A missing record is never an error: lookups return ``None`` and the
caller decides what to do.  Malformed input, on the other hand, raises
``InvalidEntityError`` immediately so that it cannot be confused with
an absent record.  Failures of the relational store (``sqlite3.Error``)
are not wrapped and reach the caller unchanged.
"""


class PetClinicError(Exception):
    """Base class for errors raised by the pet clinic core."""


class InvalidEntityError(PetClinicError, ValueError):
    """An entity failed a precondition and cannot be saved."""
