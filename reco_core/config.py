"""
reco_core/config.py
-------------------
Runtime configuration, overridable through RECO_* environment variables.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT = Path(__file__).resolve().parents[1]


class EngineSettings(BaseSettings):
    # Seed data
    catalog_path: Path = ROOT / "catalog" / "catalog.json"
    users_path: Path = ROOT / "catalog" / "users.json"
    templates_path: Path = ROOT / "explainer" / "templates.yaml"

    # Scoring
    default_algorithm: str = "hybrid"
    default_limit: int = Field(3, ge=0)
    similarity_threshold: float = 0.1     # neighbours at or below are ignored
    random_seed: Optional[int] = None     # None = popularity differs per call

    # Logging
    log_level: str = "INFO"
    event_log_dir: Optional[Path] = None  # e.g. "logs" for daily .jsonl files

    model_config = SettingsConfigDict(env_prefix="RECO_")


@lru_cache
def get_settings() -> EngineSettings:
    return EngineSettings()
