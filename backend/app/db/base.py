"""SQLAlchemy metadata registry import for schema creation."""

from app.models import ChatMessage, Pet
from app.models.base import Base

__all__ = ["Base", "ChatMessage", "Pet"]
