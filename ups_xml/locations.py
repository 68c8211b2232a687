from __future__ import annotations

from .constants import US_TERRITORIES_TREATED_AS_COUNTRIES
from .models import Location


def normalize_location(location: Location) -> Location:
    """Rewrite a US location whose province is a territory UPS addresses as its own country.

    Name and company fields are not carried onto the rewritten location.
    """
    if location.country != "US" or location.province not in US_TERRITORIES_TREATED_AS_COUNTRIES:
        return location
    return Location(
        country=location.province,
        postal_code=location.postal_code,
        city=location.city,
        address1=location.address1,
        address2=location.address2,
        address3=location.address3,
        phone=location.phone,
        fax=location.fax,
        address_type=location.address_type,
        attention_name=location.attention_name,
    )
