# reco_core/logger.py
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

import colorlog

EVENT_LOGGER = "reco.events"

_event_dir: Optional[Path] = None


def configure_logging(level=logging.INFO, event_log_dir: Optional[Path] = None):
    """Install one coloured stdout handler on the root logger."""
    global _event_dir

    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(asctime)s %(levelname)-8s [%(name)s]%(reset)s %(message)s",
            datefmt="%H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    _event_dir = Path(event_log_dir) if event_log_dir else None
    if _event_dir is not None:
        _event_dir.mkdir(parents=True, exist_ok=True)


def _log_path() -> Path:
    date = datetime.now().strftime("%Y-%m-%d")
    return _event_dir / f"{date}.jsonl"


def log_event(event_type: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """Emit a structured event; mirror it to today's JSONL file when enabled."""
    entry = {
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "type": event_type,
        "payload": payload,
    }
    line = json.dumps(entry, ensure_ascii=False, default=str)
    logging.getLogger(EVENT_LOGGER).info(line)

    if _event_dir is not None:
        with _log_path().open("a", encoding="utf-8") as f:
            f.write(line + "\n")
    return entry
