from loguru import logger

from play_whe_analytics.config import settings
from play_whe_analytics.main import setup_logging


def test_no_log_file_under_test():
    assert settings.LOG_FILE == ""


def test_file_sink_only_when_configured(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    log_file = tmp_path / "app.log"

    setup_logging(log_file=str(log_file), debug=False)
    logger.info("draws loaded")
    setup_logging(log_file="", debug=False)  # closes the file sink
    logger.info("not written")

    assert "draws loaded" in log_file.read_text()
    assert "not written" not in log_file.read_text()
    assert sorted(p.name for p in tmp_path.iterdir()) == ["app.log"]
