"""Deployment info page assembly."""

import platform
from collections.abc import Sequence

import fastapi
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.config import Settings
from app.models.pet import Pet
from app.schemas.info import InfoPage, PetRead

UNKNOWN_DATABASE = "Unknown Database"


def detect_database_type(database_url: str | None) -> str:
    """Guess the database vendor from a connection string, for display only."""

    if database_url is None:
        return UNKNOWN_DATABASE
    if "mysql" in database_url:
        return "MySQL"
    if "postgresql" in database_url:
        return "PostgreSQL"
    return UNKNOWN_DATABASE


def list_pets(db: Session) -> list[Pet]:
    """Return the full pet snapshot."""

    return list(db.scalars(select(Pet).order_by(Pet.id.asc())).all())


def build_info_page(settings: Settings, pets: Sequence[Pet]) -> InfoPage:
    """Assemble the labeled values shown on the info page."""

    return InfoPage(
        uuid=settings.app_uuid,
        version=settings.app_version,
        deployment_color=settings.deployment_color,
        framework="FastAPI",
        framework_version=fastapi.__version__,
        language="Python",
        language_version=platform.python_version(),
        runtime=platform.python_implementation(),
        database=detect_database_type(settings.database_url),
        pets=[PetRead.model_validate(pet) for pet in pets],
    )
