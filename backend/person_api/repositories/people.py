from typing import List

from sqlmodel import col, select

from person_api.models import Person
from person_api.repositories.base import Repository


class PersonRepository(Repository[Person]):
    model = Person

    def get_paged(self, page_number: int, page_size: int) -> List[Person]:
        """one page of persons ordered by id; pages past the end are empty"""
        if page_number < 1 or page_size < 1:
            raise ValueError("Page number and page size must be greater than 0")
        statement = (
            select(Person)
            .order_by(col(Person.id))
            .offset((page_number - 1) * page_size)
            .limit(page_size)
        )
        return list(self.session.exec(statement).all())

    def get_by_name(self, name: str) -> List[Person]:
        """case-insensitive substring match; % and _ in the term are literal"""
        statement = select(Person).where(col(Person.name).icontains(name, autoescape=True))
        return list(self.session.exec(statement).all())

    def get_by_age_range(self, min_age: int, max_age: int) -> List[Person]:
        statement = (
            select(Person)
            .where(Person.age >= min_age, Person.age <= max_age)
            .order_by(col(Person.age))
        )
        return list(self.session.exec(statement).all())
