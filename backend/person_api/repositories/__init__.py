from .base import Repository
from .people import PersonRepository

__all__ = ["Repository", "PersonRepository"]
