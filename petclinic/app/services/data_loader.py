"""
Sample data for a freshly started clinic.

``load_sample_data`` seeds pet types, specialties, two owners with a
pet each, a visit and two vets.  It only runs against an empty store
(no pet types yet) so restarting against a persistent database does
not duplicate records.
"""

import datetime
import logging

from ..models import Owner, Pet, PetType, Specialty, Vet, Visit
from .registry import ClinicServices


def load_sample_data(services: ClinicServices) -> bool:
    """Populate ``services`` with sample records.

    Returns ``True`` when data was loaded and ``False`` when the store
    already contained pet types.
    """
    logger = logging.getLogger(__name__)
    if services.pet_types.find_all():
        logger.info("Store already populated; skipping sample data")
        return False

    dog = services.pet_types.save(PetType(name="Dog"))
    cat = services.pet_types.save(PetType(name="Cat"))

    radiology = services.specialties.save(Specialty(description="Radiology"))
    surgery = services.specialties.save(Specialty(description="Surgery"))
    services.specialties.save(Specialty(description="Dentistry"))

    michael = Owner(
        first_name="Michael",
        last_name="Weston",
        address="123 Brickerel",
        city="Miami",
        telephone="1231231234",
    )
    services.owners.save(michael)
    rosco = Pet(name="Rosco", pet_type=dog, birth_date=datetime.date.today())
    michael.add_pet(rosco)
    services.pets.save(rosco)

    fiona = Owner(
        first_name="Fiona",
        last_name="Glenanne",
        address="123 Brickerel",
        city="Miami",
        telephone="1231231234",
    )
    services.owners.save(fiona)
    just_cat = Pet(name="Just Cat", pet_type=cat, birth_date=datetime.date.today())
    fiona.add_pet(just_cat)
    services.pets.save(just_cat)

    visit = Visit(description="Sneezy Kitty")
    just_cat.add_visit(visit)
    services.visits.save(visit)

    sam = Vet(first_name="Sam", last_name="Axe")
    sam.add_specialty(radiology)
    services.vets.save(sam)

    jessie = Vet(first_name="Jessie", last_name="Porter")
    jessie.add_specialty(surgery)
    services.vets.save(jessie)

    logger.info("Loaded sample data")
    return True
