"""
reco_core/__init__.py
---------------------
Shared contracts: domain types and the error hierarchy.
The engine facade lives in reco_core.dispatcher.
"""

from .errors import CatalogError, RecoError, TemplateError, UnknownEntity
from .types import Algorithm, Interaction, InteractionType, Product, Recommendation, User

__all__ = [
    "Algorithm",
    "Interaction",
    "InteractionType",
    "Product",
    "Recommendation",
    "User",
    "RecoError",
    "UnknownEntity",
    "CatalogError",
    "TemplateError",
]
