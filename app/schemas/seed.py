"""
Pydantic schemas for the seeding endpoints.
"""

from pydantic import BaseModel
from typing import List
import uuid


class SeededProperty(BaseModel):
    model_config = {"from_attributes": True}

    id: uuid.UUID
    title: str


class SeedResponse(BaseModel):
    message: str
    data: List[SeededProperty]
