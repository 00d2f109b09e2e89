"""ZIP code to regional cost multiplier resolution."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from household_food_cost.data.regions import (
    METRO_COST_MULTIPLIERS,
    METRO_NAMES,
    STATE_COST_MULTIPLIERS,
    STATE_NAMES,
)
from household_food_cost.domain.regions import RegionMatch

DEFAULT_MULTIPLIER = 1.0
DEFAULT_REGION_NAME = "United States"
METRO_KEY_LENGTH = 3
STATE_KEY_LENGTH = 2


@dataclass(frozen=True)
class RegionResolver:
    """Resolve ZIP codes against metro, then state, then national defaults."""

    metro_multipliers: Mapping[str, float] = field(
        default_factory=lambda: METRO_COST_MULTIPLIERS
    )
    state_multipliers: Mapping[str, float] = field(
        default_factory=lambda: STATE_COST_MULTIPLIERS
    )
    metro_names: Mapping[str, str] = field(default_factory=lambda: METRO_NAMES)
    state_names: Mapping[str, str] = field(default_factory=lambda: STATE_NAMES)

    def resolve(self, zip_code: str) -> RegionMatch:
        """Return the multiplier and display name for a ZIP code."""
        return RegionMatch(
            multiplier=self.multiplier(zip_code),
            display_name=self.display_name(zip_code),
        )

    def multiplier(self, zip_code: str) -> float:
        """Return the most specific cost multiplier for a ZIP code."""
        metro_key, state_key = _keys(zip_code)
        if metro_key in self.metro_multipliers:
            return self.metro_multipliers[metro_key]
        if state_key in self.state_multipliers:
            return self.state_multipliers[state_key]
        return DEFAULT_MULTIPLIER

    def display_name(self, zip_code: str) -> str:
        """Return the region display name for a ZIP code."""
        metro_key, state_key = _keys(zip_code)
        if metro_key in self.metro_names:
            return self.metro_names[metro_key]
        name = self.state_names.get(state_key, DEFAULT_REGION_NAME)
        if metro_key in self.metro_multipliers:
            return f"{name} Metro Area"
        return name


def _keys(zip_code: str | None) -> tuple[str | None, str | None]:
    """Split a ZIP code into metro and state keys; short input yields None."""
    cleaned = (zip_code or "").strip()
    metro_key = cleaned[:METRO_KEY_LENGTH] if len(cleaned) >= METRO_KEY_LENGTH else None
    state_key = cleaned[:STATE_KEY_LENGTH] if len(cleaned) >= STATE_KEY_LENGTH else None
    return metro_key, state_key
