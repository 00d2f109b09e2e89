"""Default person-profile catalog, infant through adult."""

from types import MappingProxyType

from household_food_cost.domain.profiles import PersonProfile

DEFAULT_PROFILES = MappingProxyType(
    {
        # Adults
        "adult-male": PersonProfile(
            age=53,
            gender="male",
            imperial_height="5'10\"",
            imperial_weight=170,
            metric_height=178,
            metric_weight=77,
            activity_level="active",
        ),
        "adult-female": PersonProfile(
            age=45,
            gender="female",
            imperial_height="5'5\"",
            imperial_weight=140,
            metric_height=165,
            metric_weight=63.5,
            activity_level="moderate",
        ),
        # Babies (0-2 years)
        "baby-6m-male": PersonProfile(
            age=0.5,
            gender="male",
            imperial_height="2'2\"",
            imperial_weight=16,
            metric_height=66,
            metric_weight=7.3,
            activity_level="sedentary",
        ),
        "baby-6m-female": PersonProfile(
            age=0.5,
            gender="female",
            imperial_height="2'1\"",
            imperial_weight=15,
            metric_height=64,
            metric_weight=6.8,
            activity_level="sedentary",
        ),
        "baby-1y-male": PersonProfile(
            age=1,
            gender="male",
            imperial_height="2'6\"",
            imperial_weight=22,
            metric_height=76,
            metric_weight=10,
            activity_level="light",
        ),
        "baby-1y-female": PersonProfile(
            age=1,
            gender="female",
            imperial_height="2'5\"",
            imperial_weight=21,
            metric_height=74,
            metric_weight=9.5,
            activity_level="light",
        ),
        # Kids (3-12 years)
        "kid-5y-male": PersonProfile(
            age=5,
            gender="male",
            imperial_height="3'7\"",
            imperial_weight=40,
            metric_height=109,
            metric_weight=18,
            activity_level="veryActive",
        ),
        "kid-5y-female": PersonProfile(
            age=5,
            gender="female",
            imperial_height="3'6\"",
            imperial_weight=39,
            metric_height=107,
            metric_weight=17.7,
            activity_level="veryActive",
        ),
        "kid-7y-male": PersonProfile(
            age=7,
            gender="male",
            imperial_height="4'0\"",
            imperial_weight=50,
            metric_height=122,
            metric_weight=22.7,
            activity_level="veryActive",
        ),
        "kid-7y-female": PersonProfile(
            age=7,
            gender="female",
            imperial_height="3'11\"",
            imperial_weight=48,
            metric_height=119,
            metric_weight=21.8,
            activity_level="veryActive",
        ),
        "kid-10y-male": PersonProfile(
            age=10,
            gender="male",
            imperial_height="4'6\"",
            imperial_weight=70,
            metric_height=137,
            metric_weight=31.8,
            activity_level="veryActive",
        ),
        "kid-10y-female": PersonProfile(
            age=10,
            gender="female",
            imperial_height="4'6\"",
            imperial_weight=70,
            metric_height=137,
            metric_weight=31.8,
            activity_level="veryActive",
        ),
        # Teens (13-19 years)
        "teen-13y-male": PersonProfile(
            age=13,
            gender="male",
            imperial_height="5'2\"",
            imperial_weight=100,
            metric_height=157,
            metric_weight=45.4,
            activity_level="veryActive",
        ),
        "teen-13y-female": PersonProfile(
            age=13,
            gender="female",
            imperial_height="5'1\"",
            imperial_weight=98,
            metric_height=155,
            metric_weight=44.5,
            activity_level="active",
        ),
        "teen-15y-male": PersonProfile(
            age=15,
            gender="male",
            imperial_height="5'7\"",
            imperial_weight=125,
            metric_height=170,
            metric_weight=56.7,
            activity_level="veryActive",
        ),
        "teen-15y-female": PersonProfile(
            age=15,
            gender="female",
            imperial_height="5'4\"",
            imperial_weight=115,
            metric_height=162,
            metric_weight=52.2,
            activity_level="active",
        ),
        "teen-16y-female": PersonProfile(
            age=16,
            gender="female",
            imperial_height="5'4\"",
            imperial_weight=120,
            metric_height=162,
            metric_weight=54.4,
            activity_level="active",
        ),
        "teen-17y-male": PersonProfile(
            age=17,
            gender="male",
            imperial_height="5'9\"",
            imperial_weight=142,
            metric_height=175,
            metric_weight=64.4,
            activity_level="veryActive",
        ),
        "teen-17y-female": PersonProfile(
            age=17,
            gender="female",
            imperial_height="5'4\"",
            imperial_weight=125,
            metric_height=162,
            metric_weight=56.7,
            activity_level="active",
        ),
    }
)

PROFILE_GROUPS = MappingProxyType(
    {
        "adults": ("Adults", ("adult-male", "adult-female")),
        "babies": (
            "Babies (0-2 years)",
            ("baby-6m-male", "baby-6m-female", "baby-1y-male", "baby-1y-female"),
        ),
        "kids": (
            "Kids (3-12 years)",
            (
                "kid-5y-male",
                "kid-5y-female",
                "kid-7y-male",
                "kid-7y-female",
                "kid-10y-male",
                "kid-10y-female",
            ),
        ),
        "teens": (
            "Teens (13-19 years)",
            (
                "teen-13y-male",
                "teen-13y-female",
                "teen-15y-male",
                "teen-15y-female",
                "teen-16y-female",
                "teen-17y-male",
                "teen-17y-female",
            ),
        ),
    }
)
