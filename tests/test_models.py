import datetime

from petclinic.app.models import Owner, Pet, Visit


def test_add_visit_links_new_visit_both_ways():
    pet = Pet(name="Max")
    visit = Visit(description="neutered")
    pet.add_visit(visit)
    assert visit.pet is pet
    assert visit in pet.visits


def test_add_visit_does_not_add_persisted_visit_again():
    pet = Pet(name="Max")
    visit = Visit(id=3, description="spayed")
    pet.add_visit(visit)
    assert visit.pet is pet
    assert pet.visits == set()


def test_visit_date_defaults_to_today():
    assert Visit().date == datetime.date.today()


def test_add_pet_sets_owner():
    owner = Owner(first_name="Eduardo", last_name="Rodriquez")
    pet = Pet(name="Rosy")
    owner.add_pet(pet)
    assert pet.owner is owner
    assert owner.pets == {pet}


def test_get_pet_by_name():
    owner = Owner()
    saved = Pet(id=1, name="Jewel")
    unsaved = Pet(name="Iggy")
    owner.add_pet(saved)
    owner.add_pet(unsaved)

    assert owner.get_pet("jewel") is saved
    assert owner.get_pet("Iggy") is unsaved
    assert owner.get_pet("Iggy", ignore_new=True) is None
    assert owner.get_pet("George") is None


def test_entities_hash_by_identity():
    a, b = Pet(name="Same"), Pet(name="Same")
    assert a != b
    assert len({a, b}) == 2
    a.id = 7
    assert a in {a}
