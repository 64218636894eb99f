from fastapi import Depends
from sqlmodel import Session

from person_api.core.clock import Clock, utc_now
from person_api.core.db import get_session
from person_api.repositories import PersonRepository
from person_api.services import PersonService


def get_clock() -> Clock:
    return utc_now


def get_person_repository(session: Session = Depends(get_session)) -> PersonRepository:
    return PersonRepository(session)


def get_person_service(
    repository: PersonRepository = Depends(get_person_repository),
    clock: Clock = Depends(get_clock),
) -> PersonService:
    return PersonService(repository, clock=clock)
