"""Contract checks run against both the in-memory and the SQLite services."""

import pytest

from petclinic.app.core.errors import InvalidEntityError
from petclinic.app.models import Owner, PetType, Specialty, Vet


def test_save_assigns_unused_id(services):
    existing = services.pet_types.save(PetType(name="Dog"))
    saved = services.pet_types.save(PetType(name="Cat"))
    assert saved.id is not None
    assert saved.id != existing.id


def test_resave_overwrites_in_place(services):
    owner = services.owners.save(Owner(first_name="Jean", last_name="Coleman"))
    count = len(services.owners.find_all())

    owner.city = "Monona"
    services.owners.save(owner)

    assert len(services.owners.find_all()) == count
    assert services.owners.find_by_id(owner.id).city == "Monona"


def test_find_by_unknown_id_returns_none(services):
    assert services.owners.find_by_id(999) is None
    assert services.vets.find_by_id(999) is None


def test_delete_by_unknown_id_is_a_noop(services):
    services.pet_types.save(PetType(name="Dog"))
    services.pet_types.delete_by_id(999)
    assert [t.name for t in services.pet_types.find_all()] == ["Dog"]


def test_delete_by_id_twice_equals_once(services):
    dog = services.pet_types.save(PetType(name="Dog"))
    services.pet_types.save(PetType(name="Cat"))

    services.pet_types.delete_by_id(dog.id)
    services.pet_types.delete_by_id(dog.id)

    assert services.pet_types.find_by_id(dog.id) is None
    assert [t.name for t in services.pet_types.find_all()] == ["Cat"]


def test_delete_entity(services):
    specialty = services.specialties.save(Specialty(description="Radiology"))
    services.specialties.delete(specialty)
    services.specialties.delete(Specialty(description="never saved"))
    assert services.specialties.find_all() == set()


def test_find_all_returns_every_saved_entity(services):
    saved = [services.pet_types.save(PetType(name=name)) for name in ("Dog", "Cat", "Bird", "Snake")]
    found = services.pet_types.find_all()
    assert len(found) == 4
    for pet_type in saved:
        assert services.pet_types.find_by_id(pet_type.id).name == pet_type.name


def test_save_none_is_rejected(services):
    with pytest.raises(InvalidEntityError):
        services.owners.save(None)


def test_owner_last_name_search(services):
    services.owners.save(Owner(first_name="Harold", last_name="Davis"))
    services.owners.save(Owner(first_name="Peter", last_name="McTavish"))
    services.owners.save(Owner(first_name="Betty", last_name="Davis"))

    exact = services.owners.find_by_last_name("Davis")
    assert sorted(o.first_name for o in exact) == ["Betty", "Harold"]

    like = services.owners.find_by_last_name_like("avi")
    assert sorted(o.first_name for o in like) == ["Betty", "Harold", "Peter"]

    assert len(services.owners.find_by_last_name_like("")) == 3
    assert services.owners.find_by_last_name_like("Nobody") == []


def test_vet_with_specialties(services):
    radiology = services.specialties.save(Specialty(description="Radiology"))
    vet = Vet(first_name="Linda", last_name="Douglas")
    surgery = services.specialties.save(Specialty(description="Surgery"))
    vet.add_specialty(radiology)
    vet.add_specialty(surgery)
    services.vets.save(vet)

    found = services.vets.find_by_id(vet.id)
    assert sorted(s.description for s in found.specialties) == ["Radiology", "Surgery"]
    assert {s.id for s in found.specialties} == {radiology.id, surgery.id}


def test_like_search_treats_wildcards_literally(services):
    services.owners.save(Owner(first_name="Ann", last_name="Mc_Donald"))
    services.owners.save(Owner(first_name="Bob", last_name="McXDonald"))

    assert [o.first_name for o in services.owners.find_by_last_name_like("c_D")] == ["Ann"]
    assert services.owners.find_by_last_name_like("%") == []
    assert services.owners.find_by_last_name_like("c\\") == []
