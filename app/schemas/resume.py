from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _FormModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(_FormModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    summary: str | None = None


class Experience(_FormModel):
    company: str | None = None
    position: str | None = None
    duration: str | None = None
    description: str | None = None


class Education(_FormModel):
    institution: str | None = None
    degree: str | None = None
    duration: str | None = None
    description: str | None = None


class ResumeRecord(_FormModel):
    personal_info: PersonalInfo | None = None
    experiences: list[Experience] | None = Field(default=None)
    education: list[Education] | None = Field(default=None)
    skills: str | None = None

    @field_validator("experiences", "education", mode="before")
    @classmethod
    def _drop_null_entries(cls, value):
        if isinstance(value, list):
            return [item for item in value if item is not None]
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def _join_skill_list(cls, value):
        if isinstance(value, (list, tuple)):
            return ", ".join(str(item) for item in value if item)
        return value
