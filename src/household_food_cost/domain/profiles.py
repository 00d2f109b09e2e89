"""Person and profile domain models."""

from dataclasses import asdict, dataclass

ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "active", "veryActive")
UNIT_SYSTEMS = ("imperial", "metric")


@dataclass(frozen=True)
class PersonProfile:
    """Demographic template for a household member archetype."""

    age: float
    gender: str
    imperial_height: str
    imperial_weight: float
    metric_height: float
    metric_weight: float
    activity_level: str


@dataclass
class Person:
    """A household member, editable by the caller.

    Numeric fields may be ``None`` after a user edit; the energy calculator
    substitutes defaults rather than failing.
    """

    id: str
    label: str
    age: float | None
    gender: str
    imperial_height: str | None
    imperial_weight: float | None
    metric_height: float | None
    metric_weight: float | None
    activity_level: str | None

    @classmethod
    def from_profile(
        cls, profile: PersonProfile, *, id: str, label: str, **overrides: object
    ) -> "Person":
        """Create a person from a profile template."""
        values: dict[str, object] = asdict(profile)
        values.update(overrides)
        return cls(id=id, label=label, **values)  # type: ignore[arg-type]
