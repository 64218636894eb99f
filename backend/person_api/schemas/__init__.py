from .people import PersonCreate, PersonRead, PersonUpdate

__all__ = ["PersonCreate", "PersonRead", "PersonUpdate"]
