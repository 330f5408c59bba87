"""
Seed data: the curated Ottawa listings and the deterministic North American generator.
"""

from app.seed.curated import OTTAWA_PROPERTIES, SEED_CITY
from app.seed.generator import GeneratedProperty, generate_property, generate_properties

__all__ = [
    "OTTAWA_PROPERTIES",
    "SEED_CITY",
    "GeneratedProperty",
    "generate_property",
    "generate_properties",
]
