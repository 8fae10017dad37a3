"""Behaviour specific to the SQLite repositories."""

import datetime
import sqlite3

import pytest

from petclinic.app.core.db import get_cursor, init_db
from petclinic.app.models import Owner, Pet, PetType, Specialty, Vet, Visit
from petclinic.app.repositories import (
    OwnerRepository,
    PetRepository,
    SpecialtyRepository,
    VetRepository,
    VisitRepository,
)
from petclinic.app.services.sql_services import OwnerRepositoryService


@pytest.fixture
def db(database_url):
    init_db(database_url)
    return database_url


def _owner_with_visit():
    owner = Owner(first_name="Maria", last_name="Escobito", city="Madison", telephone="6085557683")
    pet = Pet(name="Mulligan", birth_date=datetime.date(2007, 2, 24), pet_type=PetType(name="dog"))
    owner.add_pet(pet)
    pet.add_visit(Visit(date=datetime.date(2013, 1, 1), description="rabies shot"))
    return owner, pet


def test_init_db_is_repeatable(db):
    init_db(db)
    with get_cursor(db) as cursor:
        versions = [row["version"] for row in cursor.execute("SELECT version FROM migrations")]
    assert versions == [1, 2]


def test_owner_save_cascades_to_pets_visits_and_types(db):
    owner, pet = _owner_with_visit()
    OwnerRepository(db).save(owner)

    assert owner.id is not None
    assert pet.id is not None
    assert pet.pet_type.id is not None
    assert all(v.id is not None for v in pet.visits)

    loaded = OwnerRepository(db).find_by_id(owner.id)
    loaded_pet = next(iter(loaded.pets))
    assert loaded_pet.owner is loaded
    assert loaded_pet.birth_date == datetime.date(2007, 2, 24)
    assert loaded_pet.pet_type.name == "dog"
    (visit,) = loaded_pet.visits
    assert visit.pet is loaded_pet
    assert visit.date == datetime.date(2013, 1, 1)


def test_pet_and_visit_are_loaded_through_owner(db):
    owner, pet = _owner_with_visit()
    OwnerRepository(db).save(owner)
    visit_id = next(iter(pet.visits)).id

    loaded_pet = PetRepository(db).find_by_id(pet.id)
    assert loaded_pet in loaded_pet.owner.pets

    loaded_visit = VisitRepository(db).find_by_id(visit_id)
    assert loaded_visit.pet.owner.id == owner.id
    assert loaded_visit in loaded_visit.pet.visits


def test_deleting_owner_removes_pets_and_visits(db):
    owner, pet = _owner_with_visit()
    OwnerRepository(db).save(owner)

    OwnerRepository(db).delete(owner)

    assert PetRepository(db).find_by_id(pet.id) is None
    assert VisitRepository(db).find_all() == []


def test_visit_without_pet_surfaces_store_error(db):
    with pytest.raises(sqlite3.IntegrityError):
        VisitRepository(db).save(Visit(description="orphan"))
    assert VisitRepository(db).find_all() == []


def test_failed_owner_save_leaves_nothing_behind(db):
    owner = Owner(first_name="Jeff", last_name="Black")
    owner.add_pet(Pet(name="Lucky", pet_type=PetType(id=999, name="missing")))

    with pytest.raises(sqlite3.IntegrityError):
        OwnerRepository(db).save(owner)

    assert OwnerRepository(db).find_all() == []
    assert PetRepository(db).find_all() == []


def test_like_search_wraps_pattern(db):
    repository = OwnerRepository(db)
    repository.save(Owner(first_name="Carlos", last_name="Estaban"))
    repository.save(Owner(first_name="David", last_name="Schroeder"))
    service = OwnerRepositoryService(repository)

    assert [o.first_name for o in service.find_by_last_name_like("sta")] == ["Carlos"]
    assert [o.first_name for o in service.find_by_last_name_like("ESTA")] == ["Carlos"]
    assert [o.first_name for o in service.find_by_last_name("Schroeder")] == ["David"]
    assert repository.find_by_last_name_is_like("sta") == []


def test_vet_save_persists_new_specialties_and_rewrites_links(db):
    vets = VetRepository(db)
    vet = Vet(first_name="Helen", last_name="Leary")
    vet.add_specialty(Specialty(description="radiology"))
    vets.save(vet)
    assert len(SpecialtyRepository(db).find_all()) == 1

    vet.specialties = set()
    vets.save(vet)
    assert vets.find_by_id(vet.id).specialties == set()
    assert len(SpecialtyRepository(db).find_all()) == 1


def test_save_with_explicit_unknown_id_inserts_row(db):
    owner = OwnerRepository(db).save(Owner(id=42, first_name="James"))
    assert owner.id == 42
    assert OwnerRepository(db).find_by_id(42).first_name == "James"
