from collections.abc import Iterator

from loguru import logger

from .errors import ProfileNotFoundError
from .models import CustomerProfile


def _normalize(name: str) -> str:
    return name.casefold()


class CustomerRegistry:
    """Customer profiles keyed by case-insensitive name.

    Names are unique: creating a profile for a name that is already
    registered returns the existing profile. Profiles are never removed.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, CustomerProfile] = {}

    def create_profile(self, name: str) -> CustomerProfile:
        key = _normalize(name)
        existing = self._profiles.get(key)
        if existing is not None:
            logger.warning(
                "Profile for {!r} already exists as {!r}; reusing it", name, existing.name
            )
            return existing
        profile = CustomerProfile(name=name)
        self._profiles[key] = profile
        logger.info("Profile created for {}", name)
        return profile

    def find_by_name(self, name: str) -> CustomerProfile | None:
        return self._profiles.get(_normalize(name))

    def require(self, name: str) -> CustomerProfile:
        """Like find_by_name, but raise ProfileNotFoundError on a miss."""
        profile = self.find_by_name(name)
        if profile is None:
            raise ProfileNotFoundError(name)
        return profile

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _normalize(name) in self._profiles

    def __iter__(self) -> Iterator[CustomerProfile]:
        return iter(self._profiles.values())

    def __len__(self) -> int:
        return len(self._profiles)
