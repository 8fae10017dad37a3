"""
Startup wiring of the storage services.

``build_services`` reads the active profile once and constructs the
matching implementations.  Everything downstream receives a
``ClinicServices`` bundle and never inspects the profile itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.config import JPA_PROFILE, MAP_PROFILE, Settings
from ..core.db import init_db
from ..models import Pet, PetType, Specialty, Vet, Visit
from ..repositories import (
    OwnerRepository,
    PetRepository,
    PetTypeRepository,
    SpecialtyRepository,
    VetRepository,
    VisitRepository,
)
from . import map_services
from .crud import CrudService, OwnerService
from .sql_services import OwnerRepositoryService, RepositoryService


@dataclass
class ClinicServices:
    owners: OwnerService
    pets: CrudService[Pet, int]
    visits: CrudService[Visit, int]
    vets: CrudService[Vet, int]
    pet_types: CrudService[PetType, int]
    specialties: CrudService[Specialty, int]


def build_map_services() -> ClinicServices:
    return ClinicServices(
        owners=map_services.owner_map_service(),
        pets=map_services.pet_map_service(),
        visits=map_services.visit_map_service(),
        vets=map_services.vet_map_service(),
        pet_types=map_services.pet_type_map_service(),
        specialties=map_services.specialty_map_service(),
    )


def build_sql_services(database_url: str) -> ClinicServices:
    init_db(database_url)
    return ClinicServices(
        owners=OwnerRepositoryService(OwnerRepository(database_url)),
        pets=RepositoryService("pet", PetRepository(database_url)),
        visits=RepositoryService("visit", VisitRepository(database_url)),
        vets=RepositoryService("vet", VetRepository(database_url)),
        pet_types=RepositoryService("pet type", PetTypeRepository(database_url)),
        specialties=RepositoryService("specialty", SpecialtyRepository(database_url)),
    )


def build_services(settings: Settings) -> ClinicServices:
    """Construct the services for ``settings.active_profile``.

    Raises ``ValueError`` for a profile name that is not recognised.
    """
    logger = logging.getLogger(__name__)
    profile = (settings.active_profile or "").strip().lower() or MAP_PROFILE
    if profile == MAP_PROFILE:
        logger.info("Using in-memory storage services")
        return build_map_services()
    if profile == JPA_PROFILE:
        logger.info("Using relational storage services (%s)", settings.database_url)
        return build_sql_services(settings.database_url)
    raise ValueError(f"Unknown storage profile: {settings.active_profile!r}")
