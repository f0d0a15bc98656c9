"""Read-side repositories encapsulating query SQL."""

from skillroster.infrastructure.repositories.profiles import ProfileRepository

__all__ = ["ProfileRepository"]
