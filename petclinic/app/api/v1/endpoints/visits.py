"""
Visit endpoints for API v1, nested under owner and pet.

Saving a visit goes through the visit service, which rejects visits
whose pet or owner is not persisted with ``InvalidEntityError``
(translated to HTTP 400 by the application).
"""

from typing import List

from fastapi import APIRouter, Depends, status

from petclinic.app.api.deps import get_services
from petclinic.app.api.v1.endpoints.pets import get_pet_or_404
from petclinic.app.models import Visit
from petclinic.app.schemas.owner import VisitCreate, VisitRead
from petclinic.app.services.registry import ClinicServices


router = APIRouter()


@router.get("/", response_model=List[VisitRead])
def list_visits(owner_id: int, pet_id: int, services: ClinicServices = Depends(get_services)) -> List[VisitRead]:
    pet = get_pet_or_404(owner_id, pet_id, services)
    visits = sorted(pet.visits, key=lambda v: v.id or 0)
    return [VisitRead.model_validate(visit) for visit in visits]


@router.post("/", response_model=VisitRead, status_code=status.HTTP_201_CREATED)
def create_visit(
    owner_id: int,
    pet_id: int,
    visit_in: VisitCreate,
    services: ClinicServices = Depends(get_services),
) -> VisitRead:
    pet = get_pet_or_404(owner_id, pet_id, services)
    visit = Visit(description=visit_in.description)
    if visit_in.date is not None:
        visit.date = visit_in.date
    pet.add_visit(visit)
    services.visits.save(visit)
    return VisitRead.model_validate(visit)
