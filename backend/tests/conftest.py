import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from sqlmodel import Session, create_engine, SQLModel
from sqlmodel.pool import StaticPool

from person_api.main import app
from person_api.api.deps import get_clock
from person_api.core.db import get_session
from person_api.repositories import PersonRepository
from person_api.services import PersonService

FIXED_NOW = datetime(2026, 10, 19, 12, 30, 0, tzinfo=timezone.utc)


class FixedClock:
    """clock that only moves when a test tells it to"""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


# create in-memory test database
@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session

@pytest.fixture(name="clock")
def clock_fixture():
    return FixedClock()

@pytest.fixture(name="repository")
def repository_fixture(session: Session):
    return PersonRepository(session)

@pytest.fixture(name="service")
def service_fixture(repository: PersonRepository, clock: FixedClock):
    return PersonService(repository, clock=clock)

@pytest.fixture(name="client")
def client_fixture(session: Session, clock: FixedClock):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_clock] = lambda: clock
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
