"""Table repositories."""

from artisthub.repositories.casting import CastingRepository
from artisthub.repositories.users import UserRepository

__all__ = ["CastingRepository", "UserRepository"]
