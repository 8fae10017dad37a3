"""
Owner endpoints for API v1.

These routes list, search, create, update and delete owners.  The
search endpoint follows the clinic's "find owners" flow: no match is a
404, a single match redirects to that owner's details and several
matches are returned as a list.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from fastapi.responses import RedirectResponse

from petclinic.app.api.deps import get_services
from petclinic.app.models import Owner
from petclinic.app.schemas.owner import OwnerCreate, OwnerRead, OwnerUpdate
from petclinic.app.services.registry import ClinicServices


router = APIRouter()
logger = logging.getLogger(__name__)


def _read(owner: Owner) -> OwnerRead:
    return OwnerRead.model_validate(owner, from_attributes=True)


@router.get("/", response_model=List[OwnerRead])
def list_owners(services: ClinicServices = Depends(get_services)) -> List[OwnerRead]:
    """Return all owners ordered by id."""
    owners = sorted(services.owners.find_all(), key=lambda o: o.id or 0)
    return [_read(owner) for owner in owners]


@router.get("/selected", response_model=List[OwnerRead])
def select_owners(
    request: Request,
    last_name: str = Query("", alias="lastName"),
    services: ClinicServices = Depends(get_services),
):
    """Find owners whose last name contains ``lastName``.

    An empty ``lastName`` matches every owner.
    """
    results = services.owners.find_by_last_name_like(last_name)
    if not results:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Owner not found")
    if len(results) == 1:
        url = request.url_for("get_owner", owner_id=results[0].id)
        return RedirectResponse(url=str(url), status_code=status.HTTP_302_FOUND)
    return [_read(owner) for owner in results]


@router.get("/{owner_id}", response_model=OwnerRead)
def get_owner(owner_id: int, services: ClinicServices = Depends(get_services)) -> OwnerRead:
    """Retrieve a single owner with pets and visits.  Returns 404 when absent."""
    owner = services.owners.find_by_id(owner_id)
    if owner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Owner not found")
    return _read(owner)


@router.post("/", response_model=OwnerRead, status_code=status.HTTP_201_CREATED)
def create_owner(owner_in: OwnerCreate, services: ClinicServices = Depends(get_services)) -> OwnerRead:
    owner = services.owners.save(Owner(**owner_in.model_dump()))
    return _read(owner)


@router.put("/{owner_id}", response_model=OwnerRead)
def update_owner(
    owner_id: int,
    owner_in: OwnerUpdate,
    services: ClinicServices = Depends(get_services),
) -> OwnerRead:
    """Replace the owner's details, keeping its pets."""
    owner = services.owners.find_by_id(owner_id)
    if owner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Owner not found")
    for field, value in owner_in.model_dump().items():
        setattr(owner, field, value)
    owner = services.owners.save(owner)
    logger.info("Updated owner %s", owner_id)
    return _read(owner)


@router.delete("/{owner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_owner(owner_id: int, services: ClinicServices = Depends(get_services)) -> None:
    """Delete an owner.  Deleting an unknown owner is not an error."""
    owner = services.owners.find_by_id(owner_id)
    if owner is None:
        logger.debug("No owner %s to delete", owner_id)
        return None
    services.owners.delete(owner)
    logger.info("Deleted owner %s", owner_id)
    return None
