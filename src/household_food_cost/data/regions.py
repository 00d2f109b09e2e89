"""ZIP-prefix cost multiplier and display-name tables."""

from types import MappingProxyType

# State-level multipliers keyed by the first 2 digits of a ZIP code.
STATE_COST_MULTIPLIERS = MappingProxyType(
    {
        # Northeast
        "00": 1.15,
        "01": 1.15,
        "02": 1.20,
        "03": 1.10,
        "04": 1.10,
        "05": 1.10,
        "06": 1.20,
        "07": 1.20,
        "08": 1.20,
        "10": 1.15,
        "11": 1.15,
        "12": 1.05,  # upstate NY, below the state baseline
        "13": 1.05,
        "14": 1.05,
        "19": 1.15,
        # South
        "27": 0.95,
        "28": 0.95,
        "30": 1.00,
        "31": 0.95,
        "32": 1.05,
        "33": 1.05,
        "34": 1.05,
        "35": 0.90,
        "36": 0.90,
        "37": 0.95,
        "38": 0.90,
        "39": 0.90,
        # Midwest
        "43": 0.95,
        "44": 0.95,
        "45": 0.95,
        "46": 0.95,
        "47": 0.95,
        "48": 1.00,
        "49": 1.00,
        "50": 0.85,
        "51": 0.85,
        "52": 0.85,
        "53": 0.95,
        "54": 0.95,
        "55": 0.95,
        "56": 0.90,
        "57": 0.90,
        "60": 1.05,
        "61": 1.00,
        "62": 1.00,
        # West Coast
        "90": 1.25,
        "91": 1.25,
        "92": 1.25,
        "93": 1.20,
        "94": 1.25,
        "95": 1.25,
        "96": 1.20,
        "97": 1.15,
        "98": 1.20,
        "99": 1.15,
    }
)

# Metro overrides keyed by the first 3 digits, where a metro differs from its state.
METRO_COST_MULTIPLIERS = MappingProxyType(
    {
        # NYC
        "100": 1.45,
        "101": 1.45,
        "102": 1.45,
        "104": 1.35,
        "110": 1.30,
        "112": 1.35,
        # Other major metros
        "481": 1.05,
        "482": 1.08,
        "606": 1.25,
        "945": 1.50,
        "946": 1.50,
        "900": 1.35,
        "901": 1.35,
        "980": 1.35,
        "021": 1.35,
        "022": 1.35,
        "190": 1.25,
        "191": 1.25,
        "076": 1.30,
        "335": 1.20,
        "336": 1.20,
        "300": 1.15,
        "770": 1.20,
        "780": 1.20,
        # College towns
        "479": 1.02,
        "618": 1.05,
        "489": 1.03,
        "537": 1.00,
        "430": 1.00,
    }
)

METRO_NAMES = MappingProxyType(
    {
        "100": "Manhattan",
        "101": "Manhattan",
        "102": "Manhattan",
        "104": "Bronx",
        "110": "Queens",
        "112": "Brooklyn",
        "481": "Ann Arbor",
        "482": "Detroit Metro",
        "606": "Chicago",
        "945": "San Francisco",
        "946": "San Francisco Bay Area",
        "900": "Los Angeles",
        "901": "Los Angeles",
        "980": "Seattle",
        "021": "Boston",
        "022": "Boston Metro",
        "190": "Philadelphia",
        "191": "Philadelphia",
        "076": "Newark",
        "335": "Miami",
        "336": "Miami Metro",
        "300": "Atlanta",
        "770": "Houston",
        "780": "San Antonio",
        "479": "Lafayette",
        "618": "Champaign-Urbana",
        "489": "East Lansing",
        "537": "Madison",
        "430": "Columbus",
    }
)

STATE_NAMES = MappingProxyType(
    {
        "01": "Massachusetts",
        "02": "Massachusetts",
        "03": "New Hampshire",
        "04": "Maine",
        "05": "Vermont",
        "06": "Connecticut",
        "07": "New Jersey",
        "08": "New Jersey",
        "10": "New York",
        "11": "New York",
        "12": "New York",
        "13": "New York",
        "14": "New York",
        "19": "Pennsylvania",
        "27": "North Carolina",
        "28": "North Carolina",
        "30": "Georgia",
        "31": "Georgia",
        "32": "Florida",
        "33": "Florida",
        "34": "Florida",
        "35": "Alabama",
        "36": "Alabama",
        "37": "Tennessee",
        "38": "Tennessee",
        "39": "Mississippi",
        "43": "Ohio",
        "44": "Ohio",
        "45": "Ohio",
        "46": "Indiana",
        "47": "Indiana",
        "48": "Michigan",
        "49": "Michigan",
        "50": "Iowa",
        "51": "Iowa",
        "52": "Iowa",
        "53": "Wisconsin",
        "54": "Wisconsin",
        "55": "Minnesota",
        "56": "Minnesota",
        "57": "South Dakota",
        "60": "Illinois",
        "61": "Illinois",
        "62": "Illinois",
        "90": "California",
        "91": "California",
        "92": "California",
        "93": "California",
        "94": "California",
        "95": "California",
        "96": "California",
        "97": "Oregon",
        "98": "Washington",
        "99": "Washington",
    }
)
