"""
Service layer abstraction.

Every entity type is served through the ``CrudService`` contract.  Two
interchangeable implementations exist: in‑memory map services and
repository services backed by SQLite.  ``registry.build_services``
picks one set at startup according to the active profile, so API
handlers never depend on a concrete storage backend.
"""
