"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain entities to decouple the API
representation from storage.  Read schemas are built directly from
entities (``from_attributes``); back references such as ``pet.owner``
are exposed as ids only.
"""
