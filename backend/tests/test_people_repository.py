import pytest
from datetime import date, datetime, timezone
from person_api.core.errors import EntityNotFoundError
from person_api.models import Person

CREATED = datetime(2026, 1, 1, tzinfo=timezone.utc)


def make_person(name="John Doe", age=30, dob=date(1994, 1, 15), skills='["C#", ".NET"]'):
    return Person(name=name, age=age, date_of_birth=dob, skills=skills, created_at=CREATED)


def test_add_assigns_id(repository):
    """storage assigns the id on insert"""
    person = repository.add(make_person())

    assert person.id is not None
    assert person.id > 0
    assert repository.get_by_id(person.id).name == "John Doe"


def test_get_by_id_missing_returns_none(repository):
    assert repository.get_by_id(999) is None


def test_get_all(repository):
    repository.add(make_person("John Doe"))
    repository.add(make_person("Jane Smith", 25))

    names = [p.name for p in repository.get_all()]
    assert names == ["John Doe", "Jane Smith"]


def test_update_replaces_fields(repository):
    person = repository.add(make_person())

    person.name = "John Doe Updated"
    person.age = 31
    person.updated_at = CREATED
    repository.update(person)

    stored = repository.get_by_id(person.id)
    assert stored.name == "John Doe Updated"
    assert stored.age == 31
    assert stored.updated_at is not None


def test_update_missing_id_raises(repository):
    ghost = make_person()
    ghost.id = 12345

    with pytest.raises(EntityNotFoundError):
        repository.update(ghost)


def test_delete_removes_row(repository):
    person = repository.add(make_person())

    repository.delete(person.id)

    assert repository.get_by_id(person.id) is None
    assert repository.count() == 0


def test_delete_missing_id_raises(repository):
    with pytest.raises(EntityNotFoundError):
        repository.delete(999)


def test_exists_and_count(repository):
    person = repository.add(make_person())
    repository.add(make_person("Jane Smith"))

    assert repository.exists(person.id)
    assert not repository.exists(999)
    assert repository.count() == 2


def test_get_by_name_is_case_insensitive_substring(repository):
    repository.add(make_person("John Doe"))
    repository.add(make_person("Johnny Cash"))
    repository.add(make_person("Jane Smith"))

    names = sorted(p.name for p in repository.get_by_name("john"))
    assert names == ["John Doe", "Johnny Cash"]


def test_get_by_name_treats_wildcards_literally(repository):
    repository.add(make_person("100% Real"))
    repository.add(make_person("Plain Name"))

    assert [p.name for p in repository.get_by_name("%")] == ["100% Real"]
    assert repository.get_by_name("_") == []


def test_get_by_age_range_inclusive_and_ordered(repository):
    repository.add(make_person("Old", 60))
    repository.add(make_person("Young", 20))
    repository.add(make_person("Middle", 40))
    repository.add(make_person("Edge", 30))

    people = repository.get_by_age_range(20, 40)
    assert [p.age for p in people] == [20, 30, 40]


def test_get_paged_windows_by_id(repository):
    ids = [repository.add(make_person(f"Person {i}")).id for i in range(12)]

    first = repository.get_paged(1, 5)
    second = repository.get_paged(2, 5)
    third = repository.get_paged(3, 5)

    assert [p.id for p in first] == ids[:5]
    assert [p.id for p in second] == ids[5:10]
    assert [p.id for p in third] == ids[10:]
    assert not {p.id for p in first} & {p.id for p in second}


def test_get_paged_past_end_is_empty(repository):
    repository.add(make_person())

    assert repository.get_paged(5, 10) == []


@pytest.mark.parametrize("page_number,page_size", [(0, 10), (1, 0), (-1, 5)])
def test_get_paged_rejects_non_positive(repository, page_number, page_size):
    with pytest.raises(ValueError):
        repository.get_paged(page_number, page_size)
