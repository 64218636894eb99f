from .people import PersonService

__all__ = ["PersonService"]
