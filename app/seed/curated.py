"""
Hand-written Ottawa listings used by the default seed endpoint.
"""

from typing import List

from app.seed.generator import GeneratedProperty

SEED_CITY = "Ottawa"
SEED_STATE = "Ontario"
SEED_COUNTRY = "CA"


def _ottawa(title, description, property_type, listing_type, price, address, zip_code,
            latitude, longitude, bedrooms, bathrooms, sqft, lot_size, year_built,
            parking_spaces, amenities) -> GeneratedProperty:
    return GeneratedProperty(
        title=title,
        description=description,
        property_type=property_type,
        listing_type=listing_type,
        price=price,
        address=address,
        city=SEED_CITY,
        state=SEED_STATE,
        zip_code=zip_code,
        country=SEED_COUNTRY,
        latitude=latitude,
        longitude=longitude,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
        sqft=sqft,
        lot_size=lot_size,
        year_built=year_built,
        parking_spaces=parking_spaces,
        amenities=list(amenities),
    )


OTTAWA_PROPERTIES: List[GeneratedProperty] = [
    _ottawa(
        "Charming Victorian in The Glebe",
        "A 1912 Victorian on a quiet Glebe street with original woodwork, high ceilings and a "
        "renovated kitchen. Walk to Lansdowne Park and the Rideau Canal.",
        "house", "sale", 1_250_000, "142 Fifth Avenue", "K1S 2M8", 45.3965, -75.6910,
        4, 2.5, 2400, 3200, 1912, 1,
        ["Garden", "Hardwood Floors", "Fireplace", "Central Air"],
    ),
    _ottawa(
        "Modern Glebe Townhome",
        "Newly built three-bedroom townhome with an open main floor, a rooftop terrace and "
        "an attached garage, steps from Bank Street shops.",
        "townhouse", "sale", 875_000, "38 Holmwood Avenue", "K1S 2P5", 45.3980, -75.6880,
        3, 2, 1800, 1500, 2019, 1,
        ["Garage", "Central Air", "Rooftop Terrace", "In-Unit Laundry"],
    ),
    _ottawa(
        "Westboro Waterfront Condo",
        "Twelfth-floor condo with river views, floor-to-ceiling windows and full building "
        "amenities including a pool, gym and concierge.",
        "condo", "sale", 625_000, "500 Richmond Road Unit 1204", "K2A 0E8", 45.3876, -75.7540,
        2, 2, 1100, None, 2021, 1,
        ["Gym", "Pool", "Concierge", "In-Unit Laundry", "Central Air"],
    ),
    _ottawa(
        "Cozy Westboro Bungalow",
        "Mid-century bungalow on a deep lot with a finished basement and a mature backyard, "
        "a short walk to Westboro Village.",
        "house", "sale", 785_000, "27 Dorian Crescent", "K2A 1B5", 45.3850, -75.7610,
        3, 2, 1600, 5500, 1958, 2,
        ["Garden", "Central Air", "Fireplace", "Finished Basement"],
    ),
    _ottawa(
        "Westboro Village Rental",
        "Bright one-bedroom above the Richmond Road shops with hardwood floors and shared laundry.",
        "apartment", "rent", 1_850, "352 Richmond Road Unit 3", "K2A 0E7", 45.3870, -75.7500,
        1, 1, 650, None, 2005, 0,
        ["Hardwood Floors", "Laundry", "Central Air"],
    ),
    _ottawa(
        "Luxury Penthouse in Centretown",
        "Full-floor penthouse with wraparound windows, a private terrace and concierge service "
        "in the heart of downtown.",
        "condo", "sale", 1_850_000, "234 Laurier Avenue West PH1", "K1P 5J6", 45.4200, -75.6950,
        3, 3, 2800, None, 2020, 2,
        ["Concierge", "Gym", "Pool", "Rooftop Terrace", "Central Air", "In-Unit Laundry"],
    ),
    _ottawa(
        "Centretown Brownstone Apartment",
        "Two-bedroom suite in a restored 1920 brownstone with a working fireplace and in-unit laundry.",
        "apartment", "rent", 2_200, "185 MacLaren Street Unit 2", "K2P 0L5", 45.4175, -75.6920,
        2, 1, 900, None, 1920, 0,
        ["Hardwood Floors", "Fireplace", "In-Unit Laundry"],
    ),
    _ottawa(
        "Modern Studio near Parliament",
        "Efficient new-build studio a few blocks from Parliament Hill with a gym and concierge.",
        "apartment", "rent", 1_650, "150 Metcalfe Street Unit 808", "K2P 1P1", 45.4190, -75.6935,
        0, 1, 480, None, 2022, 0,
        ["Gym", "Concierge", "Central Air", "In-Unit Laundry"],
    ),
    _ottawa(
        "Loft-Style Condo in ByWard Market",
        "One-bedroom loft with exposed brick and tall windows overlooking the market, plus a "
        "shared rooftop terrace.",
        "condo", "sale", 545_000, "55 By Ward Market Square Unit 402", "K1N 9C3", 45.4275, -75.6925,
        1, 1, 850, None, 2018, 1,
        ["Gym", "Rooftop Terrace", "In-Unit Laundry", "Central Air"],
    ),
    _ottawa(
        "Heritage Lowertown Row House",
        "An 1890 brick row house with original details, a rear garden and easy access to the "
        "market and the river.",
        "townhouse", "sale", 695_000, "280 St. Patrick Street", "K1N 5K5", 45.4310, -75.6870,
        3, 1.5, 1400, 1200, 1890, 0,
        ["Garden", "Hardwood Floors", "Fireplace"],
    ),
    _ottawa(
        "Spacious Sandy Hill Family Home",
        "Five-bedroom home near the university with a large garden, finished basement and two "
        "parking spaces.",
        "house", "sale", 1_100_000, "85 Blackburn Avenue", "K1N 8A5", 45.4220, -75.6780,
        5, 3, 3200, 4800, 1905, 2,
        ["Garden", "Hardwood Floors", "Fireplace", "Finished Basement", "Central Air"],
    ),
    _ottawa(
        "Sandy Hill Student-Friendly Rental",
        "Three-bedroom unit close to campus with shared laundry and hardwood throughout.",
        "apartment", "rent", 2_400, "210 Henderson Avenue Unit B", "K1N 7P2", 45.4235, -75.6760,
        3, 1, 1050, None, 1965, 0,
        ["Laundry", "Hardwood Floors"],
    ),
    _ottawa(
        "Elegant New Edinburgh Estate",
        "Stately 1935 residence on a large lot with a pool, formal rooms and a double garage, "
        "minutes from Rideau Hall.",
        "house", "sale", 2_400_000, "10 Alexander Street", "K1N 9H4", 45.4380, -75.6800,
        4, 3.5, 4200, 8500, 1935, 2,
        ["Garden", "Pool", "Fireplace", "Garage", "Central Air", "Hardwood Floors"],
    ),
    _ottawa(
        "New Edinburgh Village Condo",
        "Two-bedroom condo on Beechwood Avenue with a balcony, in-suite laundry and a parking spot.",
        "condo", "sale", 489_000, "222 Beechwood Avenue Unit 305", "K1L 8A7", 45.4400, -75.6700,
        2, 1, 950, None, 2016, 1,
        ["Central Air", "In-Unit Laundry", "Balcony"],
    ),
    _ottawa(
        "Manotick Riverside Retreat",
        "Custom four-bedroom home on two acres fronting the Rideau River, with a triple garage "
        "and a private dock.",
        "house", "sale", 1_680_000, "5580 River Road", "K4M 1B1", 45.2260, -75.6840,
        4, 3, 3200, 87120, 2002, 3,
        ["Garden", "Garage", "Fireplace", "Central Air", "Hardwood Floors", "Waterfront"],
    ),
]
