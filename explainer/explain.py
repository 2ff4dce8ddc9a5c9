"""
explainer/explain.py
--------------------
Single-pass placeholder substitution. Each {name} token is looked up in
RESOLVERS and replaced with the resolver's output for (user, product).
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Mapping, Set

from reco_core.errors import TemplateError
from reco_core.types import Algorithm, Product, User

PLACEHOLDER = re.compile(r"\{(\w+)\}")


def _number(value: float) -> str:
    # 5.0 -> "5", 4.5 -> "4.5"
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


RESOLVERS: Dict[str, Callable[[User, Product], str]] = {
    "category": lambda user, product: product.category,
    "rating": lambda user, product: _number(product.rating),
    "location": lambda user, product: user.location,
    "features": lambda user, product: ", ".join(product.features[:3]),
    "key_features": lambda user, product: " and ".join(product.features[:2]),
    "brand": lambda user, product: product.brand,
    "name": lambda user, product: product.name,
}


def placeholders(template: str) -> Set[str]:
    return set(PLACEHOLDER.findall(template))


def check_template(key: str, template: str) -> str:
    if not template or not template.strip():
        raise TemplateError(f"Template '{key}' is empty")
    unknown = placeholders(template) - RESOLVERS.keys()
    if unknown:
        raise TemplateError(f"Template '{key}' uses unknown placeholders: {', '.join(sorted(unknown))}")
    return template


def render(template: str, user: User, product: Product) -> str:
    return PLACEHOLDER.sub(lambda m: RESOLVERS[m.group(1)](user, product), template)


def generate_explanation(
    user: User,
    product: Product,
    algorithm,
    templates: Mapping[Algorithm, str],
) -> str:
    """Render the template for `algorithm`, falling back to the hybrid one."""
    key = Algorithm.parse(algorithm)
    template = templates.get(key) or templates[Algorithm.HYBRID]
    return render(template, user, product)
