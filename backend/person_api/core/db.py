from sqlmodel import Session, SQLModel, create_engine, select
from person_api.core.config import settings

# sqlite connections are used from fastapi's threadpool, not just the creating thread
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=connect_args)

def init_db():
    """create tables that don't exist yet (alembic handles real migrations)"""
    # register table models on SQLModel.metadata
    import person_api.models  # noqa: F401
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session

def check_database(session: Session) -> None:
    """round trip to the database, raises if it can't be reached"""
    from person_api.models import Person
    session.exec(select(Person.id).limit(1)).first()
