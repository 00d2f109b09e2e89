"""Regional cost data keyed by the leading ZIP digit."""

from datetime import UTC, datetime
from types import MappingProxyType

from household_food_cost.domain.regions import (
    PriceIndex,
    PriceIndices,
    RegionalData,
    SeasonalFactors,
)

# Date the bundled CPI figures were published. Anything older than the
# staleness window triggers a background refresh.
PRICE_INDEX_AS_OF = datetime(2025, 1, 15, tzinfo=UTC)

# National CPI figures: food at home and food away from home.
NATIONAL_PRICE_INDICES = PriceIndices(
    groceries=PriceIndex(
        timestamp=PRICE_INDEX_AS_OF,
        base_value=276.589,
        monthly_change=0.3,
        year_over_year_change=3.4,
    ),
    restaurant=PriceIndex(
        timestamp=PRICE_INDEX_AS_OF,
        base_value=350.647,
        monthly_change=0.4,
        year_over_year_change=5.1,
    ),
)


def _region(
    cost_multiplier: float,
    winter: float,
    spring: float,
    summer: float,
    fall: float,
) -> RegionalData:
    return RegionalData(
        cost_multiplier=cost_multiplier,
        seasonal_factors=SeasonalFactors(
            winter=winter, spring=spring, summer=summer, fall=fall
        ),
        price_indices=NATIONAL_PRICE_INDICES,
    )


REGIONAL_DATABASE = MappingProxyType(
    {
        "0": _region(1.15, winter=1.12, spring=1.05, summer=0.95, fall=1.02),
        "1": _region(1.15, winter=1.10, spring=1.04, summer=0.96, fall=1.02),
        "2": _region(1.00, winter=1.06, spring=1.02, summer=0.97, fall=1.00),
        "3": _region(1.00, winter=1.02, spring=0.98, summer=1.00, fall=1.00),
        "4": _region(0.95, winter=1.08, spring=1.03, summer=0.95, fall=0.99),
        "5": _region(0.90, winter=1.10, spring=1.04, summer=0.94, fall=0.98),
        "6": _region(1.00, winter=1.08, spring=1.03, summer=0.95, fall=0.99),
        "7": _region(0.95, winter=1.01, spring=0.99, summer=1.01, fall=1.00),
        "8": _region(1.05, winter=1.07, spring=1.03, summer=0.97, fall=1.00),
        "9": _region(1.25, winter=1.03, spring=1.00, summer=0.97, fall=1.00),
    }
)
