"""
wire shapes for the persons endpoints

field names are snake_case in python and camelCase on the wire
(dateOfBirth, createdAt, ...); inputs accept either spelling.
"""
import datetime as dt
import json
from datetime import datetime, timezone
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from person_api.models.people import SKILLS_TEXT_LENGTH

MAX_SKILLS = 20


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("skill must not be blank")
    return value


Skill = Annotated[str, StringConstraints(min_length=1), AfterValidator(_not_blank)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PersonBase(CamelModel):
    name: str = Field(..., min_length=2, max_length=200, examples=["John Doe"])
    age: int = Field(..., ge=0, le=150, examples=[30])
    date_of_birth: dt.date = Field(..., examples=["1994-01-15"])
    skills: List[Skill] = Field(default_factory=list, max_length=MAX_SKILLS, examples=[["C#", ".NET"]])

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def _date_from_datetime(cls, value):
        # browsers post full iso datetimes ("1994-01-15T00:00:00.000Z"); keep the utc calendar day
        if isinstance(value, str) and "T" in value:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc)
            return value.date()
        return value

    @field_validator("skills")
    @classmethod
    def _skills_fit_column(cls, value: List[str]) -> List[str]:
        # stored as one json text column
        if len(json.dumps(value, ensure_ascii=False)) > SKILLS_TEXT_LENGTH:
            raise ValueError(f"skills must encode to at most {SKILLS_TEXT_LENGTH} characters")
        return value


class PersonCreate(PersonBase):
    """body of POST /api/persons"""
    pass


class PersonUpdate(PersonBase):
    """body of PUT /api/persons/{id}, a full replacement of the mutable fields"""
    pass


class PersonRead(CamelModel):
    id: int
    name: str
    age: int
    date_of_birth: dt.date
    skills: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # sqlite hands timestamps back without tzinfo; everything is stored as utc
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
