from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Set, Tuple

from pydantic import BaseModel, Field, field_validator


class InteractionType(str, Enum):
    VIEW = "view"
    PURCHASE = "purchase"
    ADD_TO_CART = "add_to_cart"
    RATING = "rating"


class Algorithm(str, Enum):
    COLLABORATIVE = "collaborative"
    CONTENT_BASED = "content_based"
    HYBRID = "hybrid"
    POPULARITY = "popularity"

    @classmethod
    def parse(cls, value: Any) -> "Algorithm":
        """Map an identifier onto a member; anything unrecognised is HYBRID."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.HYBRID


class Product(BaseModel):
    product_id: str
    name: str = ""
    category: str
    price: float = Field(..., ge=0)
    rating: float = Field(..., ge=0, le=5)
    description: str = ""
    brand: str = ""
    in_stock: bool = True
    features: List[str] = []

    model_config = {"frozen": True}


class Interaction(BaseModel):
    product_id: str
    type: InteractionType
    rating: Optional[float] = Field(None, ge=1, le=5)
    timestamp: Optional[datetime] = None

    model_config = {"frozen": True}


class User(BaseModel):
    user_id: str
    name: str = ""
    age: Optional[int] = None
    location: str = ""
    preferences: List[str] = []
    interaction_history: List[Interaction] = []

    model_config = {"validate_assignment": True}

    @field_validator("preferences")
    @classmethod
    def _dedupe(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))

    def interacted_product_ids(self) -> Set[str]:
        return {i.product_id for i in self.interaction_history}


class Recommendation(BaseModel):
    product: Product
    score: float
    confidence: float = Field(..., ge=0, le=100)

    model_config = {"frozen": True}


class ExplainedRecommendation(BaseModel):
    recommendation: Recommendation
    algorithm: Algorithm
    explanation: str

    model_config = {"frozen": True}


# ===============================
# Read-only summaries
# ===============================

class UserStats(BaseModel):
    user_id: str
    total_interactions: int
    purchases: int
    views: int
    cart_additions: int
    ratings: int
    average_rating: float


class CatalogFacets(BaseModel):
    categories: List[str]
    price_range: Tuple[float, float]
    rating_range: Tuple[float, float]


class AlgorithmInfo(BaseModel):
    algorithm: Algorithm
    description: str
    accuracy: float = Field(..., ge=0, le=1)
