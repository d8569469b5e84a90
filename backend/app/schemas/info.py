"""Deployment info page schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PetRead(BaseModel):
    """Serialized pet."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    species: str


class InfoPage(BaseModel):
    """Flat mapping rendered by the info page; serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    uuid: str
    version: str
    deployment_color: str
    framework: str
    framework_version: str
    language: str
    language_version: str
    runtime: str
    database: str
    pets: list[PetRead]
