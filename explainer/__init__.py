"""
explainer/__init__.py
---------------------
Natural-language justification for a (user, product, algorithm) triple.
"""

from .explain import RESOLVERS, generate_explanation, render
from .templates import DEFAULT_TEMPLATES, load_templates, merge_templates

__all__ = [
    "RESOLVERS",
    "generate_explanation",
    "render",
    "DEFAULT_TEMPLATES",
    "load_templates",
    "merge_templates",
]
