import datetime as dt
from datetime import datetime
from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field
from typing import Optional

SKILLS_TEXT_LENGTH = 2000

class Person(SQLModel, table=True):
    __tablename__ = "persons"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=200, index=True)
    age: int
    date_of_birth: dt.date
    # json array of strings, see services/skills.py
    skills: str = Field(default="[]", max_length=SKILLS_TEXT_LENGTH, sa_column_kwargs={"server_default": "[]"})
    created_at: datetime = Field(sa_type=DateTime(timezone=True), nullable=False)
    updated_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True), nullable=True)
