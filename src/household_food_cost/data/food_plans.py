"""USDA food plan monthly cost benchmarks."""

from types import MappingProxyType

# Ordered cheapest to most generous; ties in nearest-plan lookups go to the first.
USDA_FOOD_PLANS = MappingProxyType(
    {
        "individual": MappingProxyType(
            {
                "thrifty": 242.90,
                "lowCost": 313.50,
                "moderate": 384.40,
                "liberal": 472.60,
            }
        ),
        "family": MappingProxyType(
            {
                "thrifty": 894.80,
                "lowCost": 1157.90,
                "moderate": 1436.40,
                "liberal": 1766.20,
            }
        ),
    }
)
