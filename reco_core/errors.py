"""
reco_core/errors.py
-------------------
Error hierarchy shared by the store, loader and explanation layers.
"""

from typing import Any


class RecoError(Exception):
    """Base class for every error raised by the recommender."""


class UnknownEntity(RecoError, KeyError):
    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} with id {entity_id} not found")

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return self.args[0]


class CatalogError(RecoError, ValueError):
    """Seed catalog or user file is malformed."""


class TemplateError(RecoError, ValueError):
    """Explanation template references a placeholder nobody can resolve."""
