"""
business rules for persons

this is the only layer that knows skills are stored as json text and the
only place timestamps are set. missing persons come back as ``None`` (or
``False`` for delete) rather than raising, the api layer turns that into 404.

update and delete are read-then-write with no version column, so two
requests racing on the same id end with the last write winning.
"""
import logging
from typing import List, Optional

from person_api.core.clock import Clock, utc_now
from person_api.models import Person
from person_api.repositories import PersonRepository
from person_api.schemas import PersonCreate, PersonRead, PersonUpdate
from person_api.services.skills import decode_skills, encode_skills

logger = logging.getLogger(__name__)


def to_view(person: Person) -> PersonRead:
    return PersonRead(
        id=person.id,
        name=person.name,
        age=person.age,
        date_of_birth=person.date_of_birth,
        skills=decode_skills(person.skills),
        created_at=person.created_at,
        updated_at=person.updated_at,
    )


class PersonService:
    def __init__(self, repository: PersonRepository, clock: Clock = utc_now):
        self.repository = repository
        self.clock = clock

    def get_by_id(self, person_id: int) -> Optional[PersonRead]:
        person = self.repository.get_by_id(person_id)
        return to_view(person) if person else None

    def get_all(self) -> List[PersonRead]:
        return [to_view(p) for p in self.repository.get_all()]

    def get_paged(self, page_number: int, page_size: int) -> List[PersonRead]:
        return [to_view(p) for p in self.repository.get_paged(page_number, page_size)]

    def search_by_name(self, name: str) -> List[PersonRead]:
        return [to_view(p) for p in self.repository.get_by_name(name)]

    def count(self) -> int:
        return self.repository.count()

    def create(self, data: PersonCreate) -> PersonRead:
        person = Person(
            name=data.name,
            age=data.age,
            date_of_birth=data.date_of_birth,
            skills=encode_skills(data.skills),
            created_at=self.clock(),
        )
        created = self.repository.add(person)
        logger.info(f"created person {created.id}")
        return to_view(created)

    def update(self, person_id: int, data: PersonUpdate) -> Optional[PersonRead]:
        person = self.repository.get_by_id(person_id)
        if person is None:
            return None

        person.name = data.name
        person.age = data.age
        person.date_of_birth = data.date_of_birth
        person.skills = encode_skills(data.skills)
        person.updated_at = self.clock()

        updated = self.repository.update(person)
        logger.info(f"updated person {person_id}")
        return to_view(updated)

    def delete(self, person_id: int) -> bool:
        # separate existence check, see module docstring
        if not self.repository.exists(person_id):
            return False
        self.repository.delete(person_id)
        logger.info(f"deleted person {person_id}")
        return True
