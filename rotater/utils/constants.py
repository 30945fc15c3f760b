"""Project-wide constants."""

APP_NAME = "ROTATER"

TEMPERATURE_PARAM = "T2M"
PRECIPITATION_PARAM = "PRECTOTCORR"

NORTHERN_SUMMER_MONTHS = (5, 6, 7, 8, 9)
SOUTHERN_SUMMER_MONTHS = (11, 12, 1, 2, 3)

CALAMITY_TYPES = ["Flood", "Heatwave"]
CALAMITY_INTENSITIES = ["Severe", "Moderate"]

MOCK_LOCATIONS = [
    {"name": "New York", "lat": 40.7128, "lon": -74.0060},
    {"name": "London", "lat": 51.5074, "lon": -0.1278},
    {"name": "Tokyo", "lat": 35.6762, "lon": 139.6503},
    {"name": "Mumbai", "lat": 19.0760, "lon": 72.8777},
    {"name": "Sydney", "lat": -33.8688, "lon": 151.2093},
]
