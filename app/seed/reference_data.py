"""
Static reference tables for the synthetic listing generator.
Cities, per-type title and description templates, amenity pools and the
per-city slot layout. Templates are `str.format` strings.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class City:
    name: str
    state: str
    country: str
    lat: float
    lng: float
    price_multiplier: float
    zip_prefix: str
    neighborhoods: Tuple[str, ...]
    streets: Tuple[str, ...]


@dataclass(frozen=True)
class Slot:
    property_type: str
    listing_type: str


PROPERTIES_PER_CITY = 20

# 6 houses, 4 apartments, 4 condos, 3 townhouses, 2 commercial, 1 land
SLOTS: Tuple[Slot, ...] = (
    *(Slot("house", "sale") for _ in range(5)),
    Slot("house", "rent"),
    Slot("apartment", "sale"),
    *(Slot("apartment", "rent") for _ in range(3)),
    *(Slot("condo", "sale") for _ in range(3)),
    Slot("condo", "rent"),
    Slot("townhouse", "sale"),
    Slot("townhouse", "sale"),
    Slot("townhouse", "rent"),
    Slot("commercial", "sale"),
    Slot("commercial", "rent"),
    Slot("land", "sale"),
)

# (min, max) price per (property_type, listing_type); rent is monthly
PRICE_RANGES = {
    ("house", "sale"): (350_000, 1_200_000),
    ("house", "rent"): (2_000, 5_000),
    ("apartment", "rent"): (1_200, 3_500),
    ("apartment", "sale"): (200_000, 500_000),
    ("condo", "sale"): (250_000, 700_000),
    ("condo", "rent"): (1_500, 3_500),
    ("townhouse", "sale"): (300_000, 800_000),
    ("townhouse", "rent"): (1_800, 4_000),
    ("commercial", "sale"): (500_000, 3_000_000),
    ("commercial", "rent"): (3_000, 12_000),
    ("land", "sale"): (80_000, 500_000),
}
DEFAULT_PRICE_RANGE = (100_000, 500_000)

COORDINATE_PATTERN = (
    -0.035, 0.028, -0.015, 0.032, -0.008, 0.022, -0.030, 0.012,
    -0.025, 0.018, -0.003, 0.037, -0.020, 0.005, -0.012, 0.029,
    -0.038, 0.015, -0.006, 0.025,
)

POSTAL_LETTERS = "ABCEGHJKLMNPRSTVWXYZ"

AMENITY_POOLS = {
    "house": ("Garden", "Garage", "Central Air", "Fireplace", "Hardwood Floors", "Pool",
              "Finished Basement", "Smart Home", "EV Charging", "Security System"),
    "apartment": ("Laundry", "Central Air", "Elevator", "Gym", "Balcony", "Hardwood Floors",
                  "Storage", "Dog Park", "In-Unit Laundry", "Security System"),
    "condo": ("Gym", "Pool", "Concierge", "In-Unit Laundry", "Central Air", "Balcony",
              "Rooftop Terrace", "Smart Home", "EV Charging", "Storage"),
    "townhouse": ("Garage", "Garden", "Central Air", "In-Unit Laundry", "Hardwood Floors",
                  "Fireplace", "Finished Basement", "Smart Home", "Storage", "Balcony"),
    "commercial": ("Central Air", "Security System", "Elevator", "Storage", "EV Charging", "Smart Home"),
}

# Base amenity count per type; the index adds 0-2 more
AMENITY_BASE_COUNTS = {"house": 4, "apartment": 3, "condo": 4, "townhouse": 3, "commercial": 2}

# Bedroom count used in titles and descriptions when a record has none
DEFAULT_BEDROOMS = {"house": 3, "apartment": 1, "condo": 2, "townhouse": 3}


# Title templates. Placeholders: bed, hood, bedroom_label, bed_label.
HOUSE_TITLES = (
    "Charming {bed}-Bedroom Home in {hood}",
    "Spacious Family Home in {hood}",
    "Renovated Gem in {hood}",
    "Beautiful {bed}-Bed Residence near {hood}",
    "Modern Home with Character in {hood}",
    "Stunning {hood} Property with Garden",
    "Classic {bed}-Bedroom in {hood}",
    "Sun-Drenched Home in {hood}",
    "Updated {bed}-Bed Home in Prime {hood}",
    "Move-In Ready Home in {hood}",
    "Elegant Residence in {hood}",
    "Lovely {bed}-Bedroom near {hood} Park",
    "Bright and Airy Home in {hood}",
    "{hood} Colonial with Modern Updates",
    "{bed}-Bed {hood} Home with Garage",
    "Turnkey Home in {hood}",
)

APARTMENT_TITLES = (
    "Modern {bedroom_label} in {hood}",
    "Bright Apartment in {hood}",
    "{bed_label} Rental Steps from {hood}",
    "Renovated Unit in the Heart of {hood}",
    "Sunny {hood} Apartment with Views",
    "Spacious {bedroom_label} near {hood}",
    "Updated {hood} Apartment with Balcony",
    "Cozy Apartment in {hood}",
    "{bed_label} in Prime {hood} Location",
    "High-Rise Living in {hood}",
    "Pet-Friendly Apartment in {hood}",
    "{hood} Walk-Up with Character",
    "Affordable {bed_label} in {hood}",
    "Newly Finished Apartment in {hood}",
    "{hood} Flat with Modern Finishes",
    "Contemporary {hood} Apartment",
)

CONDO_TITLES = (
    "Luxury {bed}-Bed Condo in {hood}",
    "Modern Downtown Condo with City Views",
    "Sleek {hood} Condo with Amenities",
    "{bed}-Bedroom Condo in {hood}",
    "Penthouse-Style Living in {hood}",
    "Open-Concept Condo in {hood}",
    "Corner Unit Condo in {hood}",
    "Boutique Condo in {hood}",
    "{bed}-Bed {hood} Condo with Parking",
    "Bright {hood} Condo Near Transit",
    "New Construction Condo in {hood}",
    "{hood} Loft-Style Condo",
    "Waterfront Condo in {hood}",
    "Top-Floor {hood} Condo",
    "Stunning {bed}-Bed Condo near {hood}",
    "Designer Condo in {hood}",
)

TOWNHOUSE_TITLES = (
    "{bed}-Bedroom Townhouse in {hood}",
    "Modern Townhome in {hood}",
    "End-Unit Townhouse in {hood}",
    "Townhome with Garage in {hood}",
    "Spacious {bed}-Bed Townhouse near {hood}",
    "Bright Townhome in {hood}",
    "Family Townhouse in {hood}",
    "Updated Townhome Steps from {hood}",
    "{hood} Row Home with Patio",
    "{bed}-Bed Townhouse near {hood} Park",
    "Turnkey Townhome in {hood}",
    "Freehold Townhouse in {hood}",
    "{hood} Townhome with Private Yard",
    "Recently Renovated Townhouse in {hood}",
    "Charming {bed}-Bed Townhome in {hood}",
    "Multi-Level Townhouse in {hood}",
)

COMMERCIAL_TITLES = (
    "Prime Retail Space in {hood}",
    "{hood} Office Suite with Parking",
    "Commercial Space in {hood}",
    "Versatile {hood} Commercial Unit",
    "{hood} Storefront Opportunity",
    "Modern Office Space in {hood}",
    "Open-Plan Commercial Space in {hood}",
    "{hood} Mixed-Use Commercial",
    "Professional Office in {hood}",
    "High-Visibility {hood} Space",
    "{hood} Business Space for Lease",
    "{hood} Commercial Loft",
    "Turnkey Commercial Unit in {hood}",
    "{hood} Ground-Floor Retail",
    "Flexible {hood} Commercial Space",
    "{hood} Office with Street Access",
)

LAND_TITLES = (
    "Buildable Lot in {hood}",
    "Prime Development Land in {hood}",
    "Vacant Lot near {hood}",
    "{hood} Land Opportunity",
    "Residential Lot in {hood}",
    "{hood} Corner Lot",
    "Cleared Land in {hood}",
    "{hood} Building Site",
    "Investment Land near {hood}",
    "Flat Lot in {hood}",
    "{hood} Infill Lot",
    "Scenic Land Parcel in {hood}",
    "{hood} Residential Plot",
    "Opportunity Lot in {hood}",
    "{hood} Development Parcel",
    "Rare {hood} Vacant Land",
)

# Description templates. Placeholders: bed, hood, city, unit_label, sqft, lot_size.
HOUSE_DESCS = (
    "Welcome to this beautifully maintained {bed}-bedroom home in {hood}. Featuring hardwood floors, a renovated kitchen, and a spacious backyard perfect for entertaining. A true gem in {city}.",
    "This charming {bed}-bedroom residence in {hood} offers an open-concept layout with modern finishes throughout. Enjoy the private garden and quiet tree-lined street.",
    "Set on a generous lot in {hood}, this {bed}-bedroom home combines classic architecture with contemporary upgrades. Close to parks, schools, and the best of {city}.",
    "Nestled in the heart of {hood}, this family home features updated bathrooms, a chef's kitchen, and a finished basement. One of {city}'s most sought-after neighborhoods.",
    "Don't miss this stunning {bed}-bedroom property in {hood}. Original character blends seamlessly with modern amenities including central air and a two-car garage.",
    "This inviting home in {hood} has been lovingly updated while preserving its original charm. Enjoy the fireplace, sunroom, and lush garden. Walk to everything {city} has to offer.",
    "A rare find in {hood}: this {bed}-bedroom home features soaring ceilings, abundant natural light, and a wraparound porch. Perfect for families or professionals.",
    "Located in desirable {hood}, this home offers move-in-ready living with updated systems, a modern kitchen, and a private backyard oasis. Convenient to all that {city} provides.",
    "This well-appointed {bed}-bedroom home in {hood} features an eat-in kitchen, formal dining room, and a master suite with walk-in closet. Freshly painted throughout.",
    "Situated on a quiet street in {hood}, this turnkey home offers hardwood floors, stainless steel appliances, and a large deck. Minutes from downtown {city}.",
    "Bright and spacious {bed}-bedroom home in {hood} with an updated interior, energy-efficient windows, and a fully fenced yard. Move right in.",
    "This classic {hood} home has been thoughtfully renovated with a new roof, updated electrical, and a gourmet kitchen. Walking distance to shops and restaurants in {city}.",
)

APARTMENT_DESCS = (
    "This {unit_label} apartment in {hood} offers modern living with easy access to transit. Updated kitchen, in-building laundry, and great natural light. Experience the best of {city}.",
    "Bright and airy apartment in the heart of {hood}. Features hardwood floors, a renovated bathroom, and a spacious layout. Steps from shops and restaurants.",
    "Enjoy city living in this well-maintained {unit_label} in {hood}. Central air, dedicated parking, and proximity to {city}'s top attractions make this a standout.",
    "Located in sought-after {hood}, this apartment features large windows, updated finishes, and plenty of closet space. Pet-friendly building with on-site management.",
    "This {unit_label} unit in {hood} combines comfort and convenience. Modern kitchen, balcony with views, and easy access to public transit in {city}.",
    "Move into this freshly renovated apartment in {hood}. New flooring, stainless appliances, and in-unit laundry. A wonderful place to call home.",
    "Spacious {unit_label} apartment with an open floor plan in {hood}. Building amenities include a gym and rooftop deck. Central to everything in {city}.",
    "This {hood} apartment is perfect for professionals seeking a quiet retreat. Features include a modern kitchen, ample storage, and a private balcony.",
    "Cozy {unit_label} in a well-managed building in {hood}. Laundry on-site, secure entry, and close to parks and dining.",
    "Enjoy the vibrant energy of {hood} from this comfortable apartment. Updated interior, great closet space, and walk score that makes {city} living a breeze.",
    "Affordable {unit_label} apartment in {hood} with modern amenities. Central air, elevator access, and friendly neighbors make this a great find.",
    "This sunlit apartment in {hood} features an open kitchen, hardwood floors, and a balcony overlooking the neighborhood. Minutes from downtown {city}.",
)

CONDO_DESCS = (
    "This stunning {bed}-bedroom condo in {hood} features floor-to-ceiling windows, an open-concept layout, and premium finishes. Building amenities include a gym, pool, and concierge. Live the {city} lifestyle.",
    "Modern condo living at its finest in {hood}. Enjoy quartz countertops, hardwood floors, and a private balcony with breathtaking views. Underground parking included.",
    "Sleek {bed}-bedroom condo in the heart of {hood}. In-suite laundry, smart home features, and top-tier building amenities. Walking distance to the best of {city}.",
    "Corner unit condo in {hood} with abundant natural light and panoramic views. Spacious layout, modern kitchen, and a large master bedroom with ensuite.",
    "This {bed}-bedroom condo in {hood} is perfect for urban living. Open floor plan, gourmet kitchen, and full-service building with gym and rooftop terrace. {city} at your doorstep.",
    "Immaculate condo in a boutique building in {hood}. Features include in-unit laundry, central air, and a private storage locker. Move-in ready.",
    "Bright and airy {bed}-bedroom condo in {hood}. High ceilings, engineered hardwood, and a chef's kitchen with island. One of the best values in {city}.",
    "Enjoy the best of {hood} in this beautifully appointed condo. Open living space, spa-like bathroom, and floor-to-ceiling windows. Parking and locker included.",
    "This {bed}-bedroom condo in {hood} offers sophisticated urban living. Modern finishes, balcony with views, and access to premium building amenities.",
    "Tastefully designed condo in {hood} with an efficient layout and high-end finishes. Concierge, gym, and excellent transit access in {city}.",
    "Elegant {bed}-bedroom condo in a sought-after {hood} building. Spacious rooms, updated fixtures, and a private terrace for outdoor enjoyment.",
    "Loft-style condo in {hood} with exposed details and industrial charm. Open-concept living, great light, and steps from the energy of {city}.",
)

TOWNHOUSE_DESCS = (
    "This {bed}-bedroom townhouse in {hood} offers multi-level living with a modern kitchen, private patio, and attached garage. Perfect for families looking for space in {city}.",
    "Move into this beautifully updated townhome in {hood}. Open-concept main floor, in-unit laundry, and a fenced backyard. Close to schools and parks.",
    "Spacious {bed}-bedroom end-unit townhouse in {hood}. Extra windows mean extra light. Modern finishes throughout. Walk to shops and dining in {city}.",
    "Well-maintained townhome in {hood} featuring hardwood floors, an updated kitchen, and a private courtyard garden. Garage parking included.",
    "This {bed}-bedroom townhouse in {hood} combines convenience and comfort. Three levels of living space, a rooftop terrace, and proximity to {city}'s best neighborhoods.",
    "Bright and contemporary townhome in {hood} with an open layout, quartz counters, and stainless appliances. Private yard and direct-access garage.",
    "Family-friendly {bed}-bedroom townhouse in {hood}. Features include a finished basement, master ensuite, and a backyard deck. Minutes from downtown {city}.",
    "Charming townhome on a tree-lined street in {hood}. Updated systems, cozy fireplace, and a welcoming front porch. A wonderful community.",
    "This {bed}-bedroom townhome in {hood} is move-in ready with fresh paint, new flooring, and modern fixtures. Garage and private patio included.",
    "Enjoy low-maintenance living in this {hood} townhouse. Open floor plan, in-suite laundry, and great access to {city} transit.",
    "Renovated {bed}-bedroom townhome in {hood} featuring a chef's kitchen, spa bathroom, and private rooftop deck. A rare find.",
    "This freehold townhouse in {hood} offers the space of a house with the convenience of condo living. Steps from parks and restaurants in {city}.",
)

COMMERCIAL_DESCS = (
    "Prime {sqft} sqft commercial space in {hood}. Open floor plan suitable for office, retail, or creative use. High foot traffic location in {city}.",
    "Versatile {sqft} sqft commercial unit in {hood}. Features include high ceilings, loading access, and ample parking. Ready for tenant improvements.",
    "Professional office space in the heart of {hood}. Modern build-out with private offices, open workspace, and conference room. One of {city}'s most desirable business addresses.",
    "Ground-floor retail opportunity in bustling {hood}. {sqft} sqft with large storefront windows and excellent visibility. Ideal for restaurant or boutique.",
    "This {hood} commercial space offers a blank canvas for your business. High ceilings, open layout, and proximity to major transit routes in {city}. Parking included.",
    "Move your business to {hood} with this turnkey {sqft} sqft space. Modern HVAC, security system, and flexible layout for any use.",
    "Established commercial location in {hood} with excellent street-level access and signage opportunities. A prime {city} business address.",
    "Bright and open {sqft} sqft commercial unit in {hood}. Perfect for co-working, medical office, or professional services. All utilities included.",
    "Invest in this {hood} commercial property with strong rental potential. Modern systems, elevator access, and central {city} location.",
    "Flexible commercial space in {hood} offering {sqft} sqft of functional workspace. Suitable for tech startup, gallery, or consulting firm.",
)

LAND_DESCS = (
    "{lot_size} sqft buildable lot in {hood}. Flat, cleared, and ready for construction. Utilities available at the street. An excellent opportunity in {city}.",
    "Prime {lot_size} sqft parcel in desirable {hood}. Zoned residential with potential for a custom home or small development. Survey available.",
    "Rare vacant lot in {hood} surrounded by established homes. Build your dream residence on this tree-lined street in one of {city}'s best neighborhoods.",
    "Development-ready land in {hood}. {lot_size} sqft with road frontage and all services nearby. Ideal for builders or investors.",
    "This corner lot in {hood} offers excellent visibility and flexible zoning options. A rare land opportunity in the heart of {city}.",
    "Invest in the future with this {lot_size} sqft lot in up-and-coming {hood}. Surrounded by new construction and growing demand.",
    "Scenic lot in {hood} with mature trees and gentle topography. Perfect setting for a custom home. Close to parks and amenities in {city}.",
    "{lot_size} sqft of undeveloped land in {hood}. Excellent drainage, clear title, and ready for permits. Don't miss this opportunity.",
    "Spacious lot in {hood} offering privacy and room to build. Established neighborhood with easy access to highways and downtown {city}.",
    "Build-ready {lot_size} sqft lot in {hood}. All municipal services available. Architectural plans available upon request.",
)


CITIES: Tuple[City, ...] = (
    # US Cities (20)
    City(
        name="New York", state="NY", country="US",
        lat=40.758, lng=-73.986, price_multiplier=2.5, zip_prefix="100",
        neighborhoods=("Upper West Side", "Chelsea", "Tribeca", "SoHo", "Greenwich Village", "Brooklyn Heights", "Park Slope", "Harlem"),
        streets=("Broadway", "Fifth Avenue", "Madison Avenue", "Park Avenue", "Lexington Avenue", "West End Avenue", "Amsterdam Avenue", "Columbus Avenue", "Riverside Drive", "Central Park West", "Bleecker Street", "Hudson Street", "Spring Street", "Prince Street", "Waverly Place"),
    ),
    City(
        name="Los Angeles", state="CA", country="US",
        lat=34.052, lng=-118.244, price_multiplier=2.0, zip_prefix="900",
        neighborhoods=("Beverly Hills", "Silver Lake", "Venice", "Santa Monica", "Echo Park", "Los Feliz", "Downtown", "Culver City"),
        streets=("Sunset Boulevard", "Wilshire Boulevard", "Melrose Avenue", "Hollywood Boulevard", "La Brea Avenue", "Fairfax Avenue", "Venice Boulevard", "Santa Monica Boulevard", "Fountain Avenue", "Robertson Boulevard", "Beverly Drive", "Canon Drive", "Abbot Kinney Boulevard", "Main Street", "Ocean Avenue"),
    ),
    City(
        name="San Francisco", state="CA", country="US",
        lat=37.775, lng=-122.419, price_multiplier=2.5, zip_prefix="941",
        neighborhoods=("Pacific Heights", "Mission District", "Castro", "Noe Valley", "Marina District", "Russian Hill", "North Beach", "Hayes Valley"),
        streets=("Market Street", "Valencia Street", "Mission Street", "Divisadero Street", "Fillmore Street", "Haight Street", "Lombard Street", "Columbus Avenue", "Grant Avenue", "Union Street", "Chestnut Street", "Sacramento Street", "Folsom Street", "Howard Street", "Guerrero Street"),
    ),
    City(
        name="Chicago", state="IL", country="US",
        lat=41.878, lng=-87.630, price_multiplier=1.3, zip_prefix="606",
        neighborhoods=("Lincoln Park", "Wicker Park", "River North", "Logan Square", "Hyde Park", "Lakeview", "Old Town", "Pilsen"),
        streets=("Michigan Avenue", "Lake Shore Drive", "Clark Street", "Halsted Street", "Damen Avenue", "Milwaukee Avenue", "Armitage Avenue", "Division Street", "Fullerton Avenue", "Belmont Avenue", "Ashland Avenue", "Western Avenue", "North Avenue", "Clybourn Avenue", "Wells Street"),
    ),
    City(
        name="Miami", state="FL", country="US",
        lat=25.762, lng=-80.192, price_multiplier=1.7, zip_prefix="331",
        neighborhoods=("South Beach", "Brickell", "Wynwood", "Coconut Grove", "Coral Gables", "Little Havana", "Design District", "Edgewater"),
        streets=("Collins Avenue", "Ocean Drive", "Biscayne Boulevard", "Coral Way", "Brickell Avenue", "Flagler Street", "Calle Ocho", "Alton Road", "Washington Avenue", "Lincoln Road", "NW 2nd Avenue", "Grand Avenue", "Main Highway", "Ponce de Leon Boulevard", "Miracle Mile"),
    ),
    City(
        name="Seattle", state="WA", country="US",
        lat=47.606, lng=-122.332, price_multiplier=1.8, zip_prefix="981",
        neighborhoods=("Capitol Hill", "Ballard", "Fremont", "Queen Anne", "Wallingford", "Green Lake", "University District", "Beacon Hill"),
        streets=("Pike Street", "Pine Street", "Broadway", "15th Avenue", "Market Street", "Leary Way", "Aurora Avenue", "Rainier Avenue", "Denny Way", "Mercer Street", "Eastlake Avenue", "Westlake Avenue", "Stone Way", "NW 65th Street", "NE 45th Street"),
    ),
    City(
        name="Austin", state="TX", country="US",
        lat=30.267, lng=-97.743, price_multiplier=1.4, zip_prefix="787",
        neighborhoods=("Downtown", "South Congress", "East Austin", "Zilker", "Travis Heights", "Mueller", "Hyde Park", "Clarksville"),
        streets=("Congress Avenue", "South Lamar Boulevard", "Guadalupe Street", "Barton Springs Road", "Cesar Chavez Street", "Manor Road", "East 6th Street", "South 1st Street", "Red River Street", "Rainey Street", "Duval Street", "Speedway", "Burnet Road", "Anderson Lane", "Oltorf Street"),
    ),
    City(
        name="Denver", state="CO", country="US",
        lat=39.739, lng=-104.990, price_multiplier=1.5, zip_prefix="802",
        neighborhoods=("LoDo", "RiNo", "Capitol Hill", "Cherry Creek", "Highlands", "Washington Park", "Baker", "Congress Park"),
        streets=("16th Street", "Colfax Avenue", "Broadway", "Larimer Street", "Blake Street", "Market Street", "Tennyson Street", "Platte Street", "Wazee Street", "Wynkoop Street", "Champa Street", "Welton Street", "South Pearl Street", "East 17th Avenue", "Downing Street"),
    ),
    City(
        name="Boston", state="MA", country="US",
        lat=42.360, lng=-71.058, price_multiplier=2.0, zip_prefix="021",
        neighborhoods=("Back Bay", "Beacon Hill", "South End", "North End", "Charlestown", "Jamaica Plain", "Cambridge", "Brookline"),
        streets=("Boylston Street", "Newbury Street", "Commonwealth Avenue", "Beacon Street", "Charles Street", "Tremont Street", "Hanover Street", "Atlantic Avenue", "Cambridge Street", "Marlborough Street", "Dartmouth Street", "Clarendon Street", "Centre Street", "Harvard Street", "Massachusetts Avenue"),
    ),
    City(
        name="Dallas", state="TX", country="US",
        lat=32.777, lng=-96.797, price_multiplier=1.1, zip_prefix="752",
        neighborhoods=("Uptown", "Deep Ellum", "Oak Lawn", "Bishop Arts", "Knox-Henderson", "Lakewood", "Highland Park", "Preston Hollow"),
        streets=("McKinney Avenue", "Elm Street", "Commerce Street", "Main Street", "Ross Avenue", "Cedar Springs Road", "Greenville Avenue", "Fitzhugh Avenue", "Gaston Avenue", "Mockingbird Lane", "Preston Road", "Northwest Highway", "Lovers Lane", "Oak Lawn Avenue", "Harry Hines Boulevard"),
    ),
    City(
        name="Houston", state="TX", country="US",
        lat=29.760, lng=-95.370, price_multiplier=1.0, zip_prefix="770",
        neighborhoods=("Montrose", "Heights", "Midtown", "River Oaks", "Museum District", "EaDo", "West University", "Rice Village"),
        streets=("Westheimer Road", "Montrose Boulevard", "Kirby Drive", "Main Street", "Washington Avenue", "Richmond Avenue", "Shepherd Drive", "Heights Boulevard", "Bagby Street", "Allen Parkway", "San Felipe Street", "Memorial Drive", "Bissonnet Street", "University Boulevard", "Rice Boulevard"),
    ),
    City(
        name="Phoenix", state="AZ", country="US",
        lat=33.449, lng=-112.074, price_multiplier=1.1, zip_prefix="850",
        neighborhoods=("Downtown", "Arcadia", "Biltmore", "Roosevelt Row", "Encanto", "Camelback East", "North Central", "Ahwatukee"),
        streets=("Central Avenue", "Camelback Road", "Indian School Road", "Thomas Road", "McDowell Road", "7th Street", "7th Avenue", "Roosevelt Street", "Van Buren Street", "Washington Street", "Cave Creek Road", "Tatum Boulevard", "Scottsdale Road", "44th Street", "24th Street"),
    ),
    City(
        name="Philadelphia", state="PA", country="US",
        lat=39.953, lng=-75.164, price_multiplier=1.2, zip_prefix="191",
        neighborhoods=("Rittenhouse Square", "Old City", "Fishtown", "Northern Liberties", "Society Hill", "Graduate Hospital", "Fairmount", "Manayunk"),
        streets=("Broad Street", "Market Street", "Walnut Street", "Chestnut Street", "South Street", "Pine Street", "Spruce Street", "Girard Avenue", "Frankford Avenue", "Front Street", "2nd Street", "5th Street", "Main Street", "Ridge Avenue", "Lancaster Avenue"),
    ),
    City(
        name="Nashville", state="TN", country="US",
        lat=36.163, lng=-86.781, price_multiplier=1.3, zip_prefix="372",
        neighborhoods=("The Gulch", "East Nashville", "Germantown", "12 South", "Sylvan Park", "Green Hills", "Berry Hill", "Salemtown"),
        streets=("Broadway", "Church Street", "West End Avenue", "Gallatin Pike", "Nolensville Pike", "8th Avenue South", "12th Avenue South", "Woodland Street", "5th Avenue North", "Charlotte Pike", "Belmont Boulevard", "Wedgewood Avenue", "Dickerson Pike", "Lebanon Pike", "Division Street"),
    ),
    City(
        name="Portland", state="OR", country="US",
        lat=45.523, lng=-122.677, price_multiplier=1.4, zip_prefix="972",
        neighborhoods=("Pearl District", "Alberta Arts", "Hawthorne", "Division", "Sellwood", "Nob Hill", "St. Johns", "Mississippi"),
        streets=("Burnside Street", "Hawthorne Boulevard", "Division Street", "Alberta Street", "Mississippi Avenue", "NW 23rd Avenue", "Belmont Street", "Sandy Boulevard", "MLK Jr Boulevard", "Lombard Street", "Fremont Street", "Glisan Street", "Powell Boulevard", "Killingsworth Street", "Foster Road"),
    ),
    City(
        name="San Diego", state="CA", country="US",
        lat=32.716, lng=-117.161, price_multiplier=1.8, zip_prefix="921",
        neighborhoods=("Gaslamp Quarter", "North Park", "Hillcrest", "La Jolla", "Pacific Beach", "Little Italy", "Mission Hills", "Bankers Hill"),
        streets=("5th Avenue", "India Street", "University Avenue", "El Cajon Boulevard", "30th Street", "Adams Avenue", "Garnet Avenue", "Grand Avenue", "Kettner Boulevard", "Harbor Drive", "Broadway", "Market Street", "Island Avenue", "Prospect Street", "Coast Boulevard"),
    ),
    City(
        name="Atlanta", state="GA", country="US",
        lat=33.749, lng=-84.388, price_multiplier=1.1, zip_prefix="303",
        neighborhoods=("Midtown", "Virginia-Highland", "Buckhead", "Inman Park", "Old Fourth Ward", "Decatur", "Grant Park", "East Atlanta"),
        streets=("Peachtree Street", "Ponce de Leon Avenue", "North Highland Avenue", "Monroe Drive", "10th Street", "Piedmont Avenue", "Moreland Avenue", "Euclid Avenue", "DeKalb Avenue", "Memorial Drive", "Spring Street", "Juniper Street", "Edgewood Avenue", "Boulevard", "Ralph McGill Boulevard"),
    ),
    City(
        name="Washington", state="DC", country="US",
        lat=38.907, lng=-77.037, price_multiplier=2.0, zip_prefix="200",
        neighborhoods=("Georgetown", "Dupont Circle", "Capitol Hill", "Adams Morgan", "Logan Circle", "Shaw", "U Street Corridor", "Navy Yard"),
        streets=("M Street", "Connecticut Avenue", "Pennsylvania Avenue", "Wisconsin Avenue", "14th Street", "H Street", "U Street", "Massachusetts Avenue", "K Street", "Rhode Island Avenue", "New Hampshire Avenue", "P Street", "Q Street", "16th Street", "Columbia Road"),
    ),
    City(
        name="Minneapolis", state="MN", country="US",
        lat=44.978, lng=-93.265, price_multiplier=1.1, zip_prefix="554",
        neighborhoods=("North Loop", "Uptown", "Northeast", "Linden Hills", "Whittier", "Lowry Hill", "Seward", "Longfellow"),
        streets=("Hennepin Avenue", "Nicollet Avenue", "Lake Street", "Washington Avenue", "Lyndale Avenue", "1st Avenue", "2nd Street", "3rd Avenue", "Portland Avenue", "Central Avenue", "University Avenue", "Franklin Avenue", "Excelsior Boulevard", "Bryant Avenue", "Calhoun Boulevard"),
    ),
    City(
        name="Las Vegas", state="NV", country="US",
        lat=36.169, lng=-115.140, price_multiplier=1.0, zip_prefix="891",
        neighborhoods=("Summerlin", "Henderson", "Arts District", "Downtown", "Spring Valley", "Green Valley", "Centennial Hills", "Rhodes Ranch"),
        streets=("Las Vegas Boulevard", "Sahara Avenue", "Flamingo Road", "Tropicana Avenue", "Charleston Boulevard", "Fremont Street", "Desert Inn Road", "Rainbow Boulevard", "Durango Drive", "Eastern Avenue", "Maryland Parkway", "Paradise Road", "Decatur Boulevard", "Jones Boulevard", "Rampart Boulevard"),
    ),
    # Canadian Cities (5)
    City(
        name="Toronto", state="ON", country="CA",
        lat=43.653, lng=-79.383, price_multiplier=2.0, zip_prefix="M5",
        neighborhoods=("Yorkville", "Queen West", "Liberty Village", "Distillery District", "The Annex", "Leslieville", "Roncesvalles", "King West"),
        streets=("Queen Street West", "King Street West", "Bloor Street", "Dundas Street", "College Street", "Yonge Street", "Bay Street", "Spadina Avenue", "Ossington Avenue", "Bathurst Street", "Parliament Street", "Broadview Avenue", "Danforth Avenue", "St. Clair Avenue", "Eglinton Avenue"),
    ),
    City(
        name="Vancouver", state="BC", country="CA",
        lat=49.283, lng=-123.121, price_multiplier=2.2, zip_prefix="V6",
        neighborhoods=("Kitsilano", "Yaletown", "Gastown", "Mount Pleasant", "West End", "Kerrisdale", "Commercial Drive", "South Granville"),
        streets=("Robson Street", "Granville Street", "Main Street", "Broadway", "Davie Street", "Hastings Street", "Cambie Street", "Commercial Drive", "4th Avenue", "Denman Street", "Burrard Street", "West Boulevard", "Kingsway", "Oak Street", "Fraser Street"),
    ),
    City(
        name="Montreal", state="QC", country="CA",
        lat=45.502, lng=-73.567, price_multiplier=1.3, zip_prefix="H2",
        neighborhoods=("Plateau Mont-Royal", "Mile End", "Old Montreal", "Griffintown", "Outremont", "Westmount", "Verdun", "Villeray"),
        streets=("Saint-Laurent Boulevard", "Saint-Denis Street", "Sainte-Catherine Street", "Sherbrooke Street", "Mont-Royal Avenue", "Rachel Street", "Laurier Avenue", "Bernard Avenue", "Duluth Avenue", "Fairmount Avenue", "Notre-Dame Street", "Wellington Street", "de la Commune Street", "McGill Street", "Peel Street"),
    ),
    City(
        name="Calgary", state="AB", country="CA",
        lat=51.048, lng=-114.072, price_multiplier=1.1, zip_prefix="T2",
        neighborhoods=("Kensington", "Inglewood", "Beltline", "Mission", "Bridgeland", "Marda Loop", "Altadore", "Hillhurst"),
        streets=("17th Avenue SW", "4th Street SW", "Centre Street", "Edmonton Trail", "Macleod Trail", "Crowchild Trail", "9th Avenue SE", "1st Street SW", "Stephen Avenue", "10th Street NW", "14th Street SW", "Kensington Road", "Memorial Drive", "Bow Trail", "Elbow Drive"),
    ),
    City(
        name="Edmonton", state="AB", country="CA",
        lat=53.546, lng=-113.491, price_multiplier=0.9, zip_prefix="T5",
        neighborhoods=("Old Strathcona", "Oliver", "Downtown", "Garneau", "Glenora", "Ritchie", "Highlands", "Bonnie Doon"),
        streets=("Whyte Avenue", "Jasper Avenue", "104th Street", "124th Street", "Stony Plain Road", "109th Street", "82nd Avenue", "97th Street", "Gateway Boulevard", "Calgary Trail", "75th Street", "118th Avenue", "St. Albert Trail", "Groat Road", "Saskatchewan Drive"),
    ),
)

TITLE_TEMPLATES = {
    "house": HOUSE_TITLES,
    "apartment": APARTMENT_TITLES,
    "condo": CONDO_TITLES,
    "townhouse": TOWNHOUSE_TITLES,
    "commercial": COMMERCIAL_TITLES,
    "land": LAND_TITLES,
}

DESCRIPTION_TEMPLATES = {
    "house": HOUSE_DESCS,
    "apartment": APARTMENT_DESCS,
    "condo": CONDO_DESCS,
    "townhouse": TOWNHOUSE_DESCS,
    "commercial": COMMERCIAL_DESCS,
    "land": LAND_DESCS,
}
