TEST_URL = "https://wwwcie.ups.com"
LIVE_URL = "https://onlinetools.ups.com"

CARRIER_NAME = "UPS"

RESOURCES = {
    "rates": "ups.app/xml/Rate",
    "track": "ups.app/xml/Track",
    "timeintransit": "ups.app/xml/TimeInTransit",
    "shipconfirm": "ups.app/xml/ShipConfirm",
    "shipaccept": "ups.app/xml/ShipAccept",
    "shipvoid": "ups.app/xml/Void",
    "valid_address": "ups.app/xml/AV",
    "valid_address_street": "ups.app/xml/XAV",
}

PICKUP_CODES = {
    "daily_pickup": "01",
    "customer_counter": "03",
    "one_time_pickup": "06",
    "on_call_air": "07",
    "suggested_retail_rates": "11",
    "letter_center": "19",
    "air_service_center": "20",
}

CUSTOMER_CLASSIFICATIONS = {
    "wholesale": "01",
    "occasional": "03",
    "retail": "04",
}

# ---------------------------------------------------------------------------
# Service names by origin region
# ---------------------------------------------------------------------------

DEFAULT_SERVICES = {
    "01": "UPS Next Day Air",
    "02": "UPS Second Day Air",
    "03": "UPS Ground",
    "07": "UPS Worldwide Express",
    "08": "UPS Worldwide Expedited",
    "11": "UPS Standard",
    "12": "UPS Three-Day Select",
    "13": "UPS Next Day Air Saver",
    "14": "UPS Next Day Air Early A.M.",
    "54": "UPS Worldwide Express Plus",
    "59": "UPS Second Day Air A.M.",
    "65": "UPS Saver",
    "82": "UPS Today Standard",
    "83": "UPS Today Dedicated Courier",
    "84": "UPS Today Intercity",
    "85": "UPS Today Express",
    "86": "UPS Today Express Saver",
}

CANADA_ORIGIN_SERVICES = {
    "01": "UPS Express",
    "02": "UPS Expedited",
    "14": "UPS Express Early A.M.",
}

MEXICO_ORIGIN_SERVICES = {
    "07": "UPS Express",
    "08": "UPS Expedited",
    "54": "UPS Express Plus",
}

EU_ORIGIN_SERVICES = {
    "07": "UPS Express",
    "08": "UPS Expedited",
}

OTHER_NON_US_ORIGIN_SERVICES = {
    "07": "UPS Express",
}

# EU membership as of November 2007, which is what the service tables were written against
EU_COUNTRY_CODES = frozenset({
    "GB", "AT", "BE", "BG", "CY", "CZ", "DK", "EE", "FI", "FR", "DE", "GR", "HU", "IE",
    "IT", "LV", "LT", "LU", "MT", "NL", "PL", "PT", "RO", "SK", "SI", "ES", "SE",
})

US_TERRITORIES_TREATED_AS_COUNTRIES = frozenset({"AS", "FM", "GU", "MH", "MP", "PW", "PR", "VI"})

# ---------------------------------------------------------------------------
# Units of measurement
# ---------------------------------------------------------------------------

IMPERIAL_COUNTRY_CODES = frozenset({"US", "LR", "MM"})

MINIMUM_MEASURE = 0.1
MEASURE_DECIMALS = 3

# ---------------------------------------------------------------------------
# Fixed request values
# ---------------------------------------------------------------------------

RATE_PACKAGING_TYPE = "02"
TRACK_SHIPMENT_TYPE = "01"
XPCI_VERSION = "1.0002"
LABEL_PRINT_METHOD = "GIF"
LABEL_IMAGE_FORMAT = "PNG"

# Time-in-transit requests describe a nominal shipment, not the real one
TRANSIT_COUNTRY_CODE = "US"
TRANSIT_PACKAGE_COUNT = "1"
TRANSIT_WEIGHT = "5"
TRANSIT_WEIGHT_UNIT = "LBS"

DEFAULT_PICKUP_CUTOFF = "3pm"

SUCCESS_STATUS_CODE = "1"

# Return service codes accepted by ShipConfirm
RETURN_SERVICE_CODES = {
    "2": "UPS Print and Mail (PNM)",
    "3": "UPS Return Service 1-Attempt (RS1)",
    "5": "UPS Return Service 3-Attempt (RS3)",
    "8": "UPS Electronic Return Label (ERL)",
    "9": "UPS Print Return Label (PRL)",
}
