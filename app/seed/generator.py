"""
Deterministic synthetic listing generator.
Every record is a pure function of its global index and the reference tables:
no randomness and no external state, so any record can be rebuilt on its own.
"""

from dataclasses import dataclass, asdict, field
from typing import Callable, Dict, List, Optional, Sequence, TypeVar
import math

from app.seed.reference_data import (
    AMENITY_BASE_COUNTS,
    AMENITY_POOLS,
    CITIES,
    COORDINATE_PATTERN,
    DEFAULT_BEDROOMS,
    DEFAULT_PRICE_RANGE,
    DESCRIPTION_TEMPLATES,
    POSTAL_LETTERS,
    PRICE_RANGES,
    PROPERTIES_PER_CITY,
    SLOTS,
    TITLE_TEMPLATES,
    City,
)

T = TypeVar("T")


@dataclass
class PropertyDetails:
    bedrooms: Optional[int]
    bathrooms: Optional[float]
    sqft: int
    lot_size: Optional[int]
    year_built: Optional[int]
    parking_spaces: int


@dataclass
class GeneratedProperty:
    """A synthetic listing ready to be inserted as a `Property` row."""

    title: str
    description: str
    property_type: str
    listing_type: str
    price: int
    address: str
    city: str
    state: str
    zip_code: str
    country: str
    latitude: float
    longitude: float
    bedrooms: Optional[int]
    bathrooms: Optional[float]
    sqft: int
    lot_size: Optional[int]
    year_built: Optional[int]
    parking_spaces: int
    amenities: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


def js_round(value: float) -> int:
    """Round half up (towards +infinity on .5), matching browser `Math.round`."""
    return math.floor(value + 0.5)


def pick(index: int, low: int, high: int) -> int:
    """Deterministic value in the inclusive range [low, high]."""
    return low + index % (high - low + 1)


def pick_from(items: Sequence[T], index: int) -> T:
    return items[index % len(items)]


def round_half(value: float) -> float:
    return js_round(value * 2) / 2


def coordinate_offset(index: int, spread: float = 1.0) -> float:
    """Fixed offset from a city centre; `spread` scales the largest step to degrees."""
    return COORDINATE_PATTERN[index % len(COORDINATE_PATTERN)] * (spread / 0.035)


def listing_price(property_type: str, listing_type: str, multiplier: float, index: int) -> int:
    """
    Price for a listing at `index`, scaled by the city multiplier.

    The range for (type, listing type) is split into 20 steps; sale prices are
    rounded to the nearest 1000 and rents to the nearest 50.
    """
    low, high = PRICE_RANGES.get((property_type, listing_type), DEFAULT_PRICE_RANGE)
    step = (high - low) / 19
    raw = low + step * (index % 20)
    price = js_round(raw * multiplier)

    if listing_type == "sale":
        return js_round(price / 1000) * 1000
    return js_round(price / 50) * 50


def _house_details(i: int) -> PropertyDetails:
    return PropertyDetails(
        bedrooms=pick(i, 2, 6),
        bathrooms=round_half(pick(i + 3, 2, 8) / 2),
        sqft=pick(i + 1, 0, 10) * 330 + 1200,
        lot_size=pick(i + 2, 0, 12) * 1000 + 2000,
        year_built=pick(i + 4, 1920, 2025),
        parking_spaces=pick(i + 5, 1, 3),
    )


def _apartment_details(i: int) -> PropertyDetails:
    return PropertyDetails(
        bedrooms=pick(i, 0, 3),
        bathrooms=float(pick(i + 1, 1, 2)),
        sqft=pick(i + 2, 0, 10) * 110 + 400,
        lot_size=None,
        year_built=pick(i + 3, 1960, 2024),
        parking_spaces=pick(i + 4, 0, 1),
    )


def _condo_details(i: int) -> PropertyDetails:
    return PropertyDetails(
        bedrooms=pick(i, 1, 3),
        bathrooms=round_half(pick(i + 1, 2, 5) / 2),
        sqft=pick(i + 2, 0, 13) * 100 + 600,
        lot_size=None,
        year_built=pick(i + 3, 2000, 2025),
        parking_spaces=1,
    )


def _townhouse_details(i: int) -> PropertyDetails:
    return PropertyDetails(
        bedrooms=pick(i, 2, 4),
        bathrooms=round_half(pick(i + 1, 3, 7) / 2),
        sqft=pick(i + 2, 0, 14) * 100 + 1000,
        lot_size=pick(i + 3, 0, 10) * 200 + 1000,
        year_built=pick(i + 4, 1980, 2024),
        parking_spaces=pick(i + 5, 1, 2),
    )


def _commercial_details(i: int) -> PropertyDetails:
    return PropertyDetails(
        bedrooms=None,
        bathrooms=float(pick(i, 1, 4)),
        sqft=pick(i + 1, 0, 7) * 500 + 1000,
        lot_size=None,
        year_built=pick(i + 2, 1990, 2023),
        parking_spaces=pick(i + 3, 3, 10),
    )


def _land_details(i: int) -> PropertyDetails:
    lot = pick(i, 0, 8) * 5000 + 5000
    return PropertyDetails(
        bedrooms=None, bathrooms=None, sqft=lot, lot_size=lot, year_built=None, parking_spaces=0
    )


DETAIL_BUILDERS: Dict[str, Callable[[int], PropertyDetails]] = {
    "house": _house_details,
    "apartment": _apartment_details,
    "condo": _condo_details,
    "townhouse": _townhouse_details,
    "commercial": _commercial_details,
    "land": _land_details,
}


def property_details(property_type: str, index: int) -> PropertyDetails:
    builder = DETAIL_BUILDERS.get(property_type)
    if builder is None:
        return PropertyDetails(None, None, 0, None, None, 0)
    return builder(index)


def postal_code(city: City, index: int) -> str:
    """US ZIP (prefix + 2 digits) or Canadian postal code (prefix + digit, space, digit letter digit)."""
    if city.country == "CA":
        letter = POSTAL_LETTERS[(index * 3 + 7) % len(POSTAL_LETTERS)]
        return f"{city.zip_prefix}{index % 10} {(index * 2 + 3) % 10}{letter}{(index + 1) % 10}"
    return f"{city.zip_prefix}{(index * 7 + 13) % 100:02d}"


def street_address(property_type: str, streets: Sequence[str], slot_index: int, global_index: int) -> str:
    street = pick_from(streets, slot_index + global_index)
    number = (global_index * 137 + slot_index * 41 + 23) % 9900 + 100
    address = f"{number} {street}"

    if property_type in ("apartment", "condo"):
        floor = (slot_index * 3 + global_index) % 20 + 1
        unit = (slot_index + global_index * 2) % 12 + 1
        unit_label = f"{floor}{chr(65 + unit % 6)}" if floor > 5 else str(unit)
        address = f"{address} Unit {unit_label}"
    return address


def _bedroom_labels(bed: int) -> Dict[str, str]:
    if bed == 0:
        return {"bedroom_label": "Studio", "bed_label": "Studio", "unit_label": "studio"}
    return {
        "bedroom_label": f"{bed}-Bedroom",
        "bed_label": f"{bed}-Bed",
        "unit_label": f"{bed}-bedroom",
    }


def listing_title(property_type: str, bedrooms: Optional[int], hood: str, index: int) -> str:
    templates = TITLE_TEMPLATES.get(property_type)
    if templates is None:
        return f"Property in {hood}"
    bed = bedrooms if bedrooms is not None else DEFAULT_BEDROOMS.get(property_type, 0)
    return pick_from(templates, index).format(bed=bed, hood=hood, **_bedroom_labels(bed))


def listing_description(
    property_type: str, details: PropertyDetails, hood: str, city: str, index: int
) -> str:
    templates = DESCRIPTION_TEMPLATES.get(property_type)
    if templates is None:
        return f"A wonderful property in {hood}, {city}."

    bed = details.bedrooms if details.bedrooms is not None else DEFAULT_BEDROOMS.get(property_type, 0)
    lot_size = details.lot_size if details.lot_size is not None else details.sqft
    return pick_from(templates, index).format(
        bed=bed,
        hood=hood,
        city=city,
        sqft=f"{details.sqft:,}",
        lot_size=f"{lot_size:,}",
        **_bedroom_labels(bed),
    )


def listing_amenities(property_type: str, index: int) -> List[str]:
    """Consecutive, wrapping run of the type's amenity pool starting at `index`."""
    if property_type == "land":
        return ["Waterfront"] if index % 5 == 0 else []

    pool = AMENITY_POOLS.get(property_type)
    if pool is None:
        return []
    count = AMENITY_BASE_COUNTS[property_type] + index % 3
    start = index % len(pool)
    return [pool[(start + offset) % len(pool)] for offset in range(count)]


def total_properties() -> int:
    return len(CITIES) * PROPERTIES_PER_CITY


def generate_property(global_index: int) -> GeneratedProperty:
    """
    Build the listing at `global_index` (city = index // 20, slot = index % 20).

    Raises:
        ValueError: If the index falls outside the city table
    """
    if not 0 <= global_index < total_properties():
        raise ValueError(f"global_index must be in [0, {total_properties()})")

    city_index, slot_index = divmod(global_index, PROPERTIES_PER_CITY)
    city = CITIES[city_index]
    slot = SLOTS[slot_index]

    hood = pick_from(city.neighborhoods, slot_index + city_index * 3)
    details = property_details(slot.property_type, global_index)

    return GeneratedProperty(
        title=listing_title(slot.property_type, details.bedrooms, hood, global_index),
        description=listing_description(slot.property_type, details, hood, city.name, global_index),
        property_type=slot.property_type,
        listing_type=slot.listing_type,
        price=listing_price(slot.property_type, slot.listing_type, city.price_multiplier, global_index),
        address=street_address(slot.property_type, city.streets, slot_index, global_index),
        city=city.name,
        state=city.state,
        zip_code=postal_code(city, slot_index),
        country=city.country,
        latitude=round(city.lat + coordinate_offset(slot_index), 4),
        longitude=round(city.lng + coordinate_offset((slot_index + 7) % PROPERTIES_PER_CITY), 4),
        bedrooms=details.bedrooms,
        bathrooms=details.bathrooms,
        sqft=details.sqft,
        lot_size=details.lot_size,
        year_built=details.year_built,
        parking_spaces=details.parking_spaces,
        amenities=listing_amenities(slot.property_type, global_index),
    )


def generate_properties(city_count: Optional[int] = None) -> List[GeneratedProperty]:
    """Generate every listing for the first `city_count` cities (all cities when None)."""
    cities = len(CITIES) if city_count is None else max(0, min(city_count, len(CITIES)))
    return [generate_property(index) for index in range(cities * PROPERTIES_PER_CITY)]
