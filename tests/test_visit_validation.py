import pytest

from petclinic.app.core.errors import InvalidEntityError, PetClinicError
from petclinic.app.models import Owner, Pet, Visit
from petclinic.app.services.map_services import visit_map_service


@pytest.fixture
def visit_service():
    return visit_map_service()


def test_visit_for_persisted_pet_and_owner_is_saved(visit_service):
    pet = Pet(id=5, name="Leo", owner=Owner(id=2))
    visit = Visit(description="rabies shot")
    pet.add_visit(visit)

    saved = visit_service.save(visit)

    assert saved.id is not None
    assert visit_service.find_by_id(saved.id) is visit
    assert visit in pet.visits


@pytest.mark.parametrize(
    "pet",
    [
        None,
        Pet(name="unsaved"),
        Pet(id=5, name="no owner"),
        Pet(id=5, name="unsaved owner", owner=Owner(first_name="New")),
    ],
    ids=["no-pet", "unsaved-pet", "no-owner", "unsaved-owner"],
)
def test_visit_without_persisted_pet_or_owner_is_rejected(visit_service, pet):
    with pytest.raises(InvalidEntityError):
        visit_service.save(Visit(description="checkup", pet=pet))
    assert visit_service.find_all() == set()


def test_none_visit_is_rejected(visit_service):
    with pytest.raises(InvalidEntityError):
        visit_service.save(None)


def test_invalid_entity_error_is_distinct_from_not_found(visit_service):
    assert visit_service.find_by_id(42) is None
    assert issubclass(InvalidEntityError, PetClinicError)
    assert issubclass(InvalidEntityError, ValueError)
