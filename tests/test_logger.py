import json
import logging

from reco_core import logger as reco_logger
from reco_core.logger import EVENT_LOGGER, configure_logging, log_event


def test_log_event_emits_on_event_logger(caplog):
    with caplog.at_level(logging.INFO, logger=EVENT_LOGGER):
        entry = log_event("preferences_updated", {"user_id": "U001", "preferences": ["Books"]})
    assert entry["type"] == "preferences_updated"
    record = json.loads(caplog.records[-1].getMessage())
    assert record["payload"] == {"user_id": "U001", "preferences": ["Books"]}


def test_event_file_is_written_when_configured(tmp_path, engine):
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        configure_logging(logging.DEBUG, event_log_dir=tmp_path / "logs")
        engine.record_interaction("U001", "P002", "view")
        engine.get_recommendations("U001", "content_based", 2)

        files = list((tmp_path / "logs").glob("*.jsonl"))
        assert len(files) == 1
        lines = [json.loads(l) for l in files[0].read_text(encoding="utf-8").splitlines()]
        assert [l["type"] for l in lines] == ["interaction_recorded", "recommendations_served"]
        assert lines[1]["payload"]["product_ids"] == ["P004", "P005"]
    finally:
        reco_logger._event_dir = None
        root.handlers, root.level = saved
