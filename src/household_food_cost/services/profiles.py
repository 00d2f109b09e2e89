"""Read-only catalog of person-profile archetypes."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from household_food_cost.data.profiles import DEFAULT_PROFILES, PROFILE_GROUPS
from household_food_cost.domain.profiles import PersonProfile
from household_food_cost.errors import ProfileNotFoundError


@dataclass(frozen=True)
class ProfileStore:
    """Lookup of demographic defaults by archetype id."""

    profiles: Mapping[str, PersonProfile] = field(
        default_factory=lambda: DEFAULT_PROFILES
    )
    groups: Mapping[str, tuple[str, tuple[str, ...]]] = field(
        default_factory=lambda: PROFILE_GROUPS
    )

    def lookup(self, archetype_id: str) -> PersonProfile:
        """Return the profile for an archetype id."""
        profile = self.profiles.get(archetype_id)
        if profile is None:
            raise ProfileNotFoundError(archetype_id)
        return profile

    def ids(self) -> list[str]:
        """Return all archetype ids in catalog order."""
        return list(self.profiles)

    def describe(self, archetype_id: str) -> str:
        """Return a short human-readable description of an archetype."""
        profile = self.lookup(archetype_id)
        gender = "Male" if profile.gender == "male" else "Female"
        age = f"{profile.age:g}"
        return (
            f"{gender}, {age} years, {profile.imperial_height}, "
            f"{profile.imperial_weight:g} lbs"
        )
