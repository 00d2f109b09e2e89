"""Error taxonomy for the estimation engine."""


class EstimationError(Exception):
    """Base class for engine errors surfaced to callers."""


class ValidationError(EstimationError):
    """Required input is missing or out of range before a calculation runs."""

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class NotFoundError(EstimationError):
    """A keyed lookup has no entry."""


class ProfileNotFoundError(NotFoundError):
    """Archetype id is absent from the profile catalog."""

    def __init__(self, archetype_id: str) -> None:
        super().__init__(f"Unknown profile archetype: {archetype_id}")
        self.archetype_id = archetype_id


class RegionNotFoundError(NotFoundError):
    """Region key has no regional cost data."""

    def __init__(self, region_key: str) -> None:
        super().__init__(f"No regional data for region key: {region_key!r}")
        self.region_key = region_key


class RefreshFailure(EstimationError):
    """Price index refresh failed; stale data stays in use."""
