"""
explainer/templates.py
----------------------
Loads explanation templates from YAML, with built-in defaults for any
algorithm the file leaves out.
"""

import logging
from pathlib import Path
from typing import Dict, Mapping, Optional

import yaml

from explainer.explain import check_template
from reco_core.errors import TemplateError
from reco_core.types import Algorithm

TEMPLATES_PATH = Path(__file__).parent / "templates.yaml"

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES: Dict[Algorithm, str] = {
    Algorithm.COLLABORATIVE: (
        "Users with similar preferences to you also enjoyed this product. "
        "Based on your purchase history and ratings, we think you'll love it too."
    ),
    Algorithm.CONTENT_BASED: (
        "This product matches your interest in {category} and has features similar "
        "to items you've previously purchased: {features}."
    ),
    Algorithm.HYBRID: (
        "This recommendation combines insights from similar users and your personal "
        "preferences for {category} products with {key_features}."
    ),
    Algorithm.POPULARITY: (
        "This is a trending product in {category} with excellent ratings ({rating}/5) "
        "that many customers in {location} have purchased recently."
    ),
}


def load_templates(path: Optional[Path] = TEMPLATES_PATH) -> Dict[Algorithm, str]:
    """
    Merge templates from `path` over the defaults. Every template is
    checked for unknown placeholders before it is accepted.
    """
    templates = dict(DEFAULT_TEMPLATES)
    if path is None or not Path(path).exists():
        logger.info("No template file at %s, using built-in templates", path)
        return templates

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise TemplateError(f"{path} must map algorithm ids to template strings")
    return merge_templates(raw)


def merge_templates(overrides: Mapping) -> Dict[Algorithm, str]:
    """
    Layer `overrides` (keyed by Algorithm or its id) over the defaults,
    checking each one. Unknown algorithm keys are skipped.
    """
    templates = dict(DEFAULT_TEMPLATES)
    for key, text in overrides.items():
        try:
            algorithm = Algorithm(key)
        except ValueError:
            logger.warning("Ignoring template for unknown algorithm '%s'", key)
            continue
        if not isinstance(text, str):
            raise TemplateError(f"Template '{key}' must be a string")
        templates[algorithm] = check_template(algorithm.value, text)
    return templates
