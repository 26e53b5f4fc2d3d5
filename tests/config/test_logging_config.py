import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fedex_tracking_report.config.logging_config import get_logger, truncate_body


def _reset(name):
    lg = logging.getLogger(name)
    for h in list(lg.handlers):
        lg.removeHandler(h)
    return lg


def test_get_logger_idempotent_no_duplicate_handlers(tmp_path):
    _reset("ftr.test")
    log_path = tmp_path / "run.log"
    logger = get_logger("ftr.test", level="DEBUG",
                        log_file=log_path, console=False)
    logger2 = get_logger("ftr.test", level="DEBUG",
                         log_file=log_path, console=False)

    assert logger is logger2
    assert len(logger.handlers) == 1


def test_get_logger_adds_console_handler():
    _reset("ftr.console")
    logger = get_logger("ftr.console", level="INFO", console=True)
    shs = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
    assert len(shs) == 1


def test_get_logger_writes_to_file(tmp_path):
    _reset("ftr.file")
    log_file = tmp_path / "logs" / "app.log"
    logger = get_logger("ftr.file", level="INFO",
                        log_file=log_file, console=False)
    logger.info("hello world")

    content = log_file.read_text(encoding="utf-8")
    assert "| INFO | ftr.file | hello world" in content


def test_get_logger_respects_level_env(monkeypatch, tmp_path):
    _reset("ftr.level.env")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    log_file = tmp_path / "lvl.log"
    logger = get_logger("ftr.level.env", log_file=log_file, console=False)

    logger.info("should NOT appear")
    logger.error("should appear")

    text = log_file.read_text(encoding="utf-8")
    assert "should appear" in text
    assert "should NOT appear" not in text


def test_console_then_file_yields_two_handlers(tmp_path):
    name = "ftr.multi"
    _reset(name)
    lg1 = get_logger(name, level="INFO", console=True)
    lg2 = get_logger(name, level="INFO", console=True,
                     log_file=tmp_path / "x.log")

    assert lg1 is lg2
    assert len(lg2.handlers) == 2


def test_new_log_file_replaces_and_closes_old_handler(tmp_path):
    name = "ftr.switch"
    _reset(name)
    first, second = tmp_path / "a.log", tmp_path / "b.log"
    logger = get_logger(name, level="INFO", log_file=first, console=False)
    logger.info("to a")
    old = logger.handlers[0]

    get_logger(name, level="INFO", log_file=second, console=False)
    logger.info("to b")

    fhs = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
    assert [Path(h.baseFilename) for h in fhs] == [second.resolve()]
    assert old.stream is None
    assert "to b" not in first.read_text(encoding="utf-8")
    assert "to b" in second.read_text(encoding="utf-8")


def test_truncate_body():
    assert truncate_body("abc", limit=5) == "abc"
    assert truncate_body("abcdefgh", limit=5) == "abcde..."
    assert truncate_body(None) is None
