import logging
import os
import time
from pathlib import Path

import pytest

from vibe import InvalidArgumentError, InvalidRangeError, config
from vibe.debug_logger import DebugLogger, log_function, prune_old_logs, raise_logged
from vibe.randomness import random_int
from vibe.strings import reverse_string


def _read(logger: DebugLogger) -> str:
    logger.close()
    return logger.log_file.read_text(encoding="utf-8")


def test_disabled_trace_writes_nothing(tmp_path: Path):
    logger = DebugLogger.initialize(enabled=False, log_dir=tmp_path)

    assert reverse_string("abc") == "cba"

    assert logger.enabled is False
    assert logger.log_file is None
    assert not any(tmp_path.iterdir())


def test_initialize_returns_singleton(tmp_path: Path):
    first = DebugLogger.initialize(enabled=True, log_dir=tmp_path)
    second = DebugLogger.initialize(enabled=False)
    assert first is second
    assert DebugLogger.get_instance() is first
    assert first.enabled is True
    assert first.log_file.name.startswith("vibe_debug_")


def test_public_functions_are_traced(tmp_path: Path):
    logger = DebugLogger.initialize(enabled=True, log_dir=tmp_path)

    assert reverse_string("abc") == "cba"
    content = _read(logger)

    assert "vibe.strings" in content
    assert "[CALL]" in content
    assert '"function": "reverse_string"' in content
    assert "'abc'" in content


def test_keyword_arguments_are_traced(tmp_path: Path):
    logger = DebugLogger.initialize(enabled=True, log_dir=tmp_path)

    random_int(1, 1, rng=None)
    content = _read(logger)

    assert "vibe.randomness" in content
    assert '"kwargs": {"rng": "None"}' in content


def test_validation_errors_are_traced(tmp_path: Path):
    logger = DebugLogger.initialize(enabled=True, log_dir=tmp_path)

    with pytest.raises(InvalidArgumentError):
        reverse_string(123)
    content = _read(logger)

    assert "[ERROR]" in content
    assert "ERROR   " in content
    assert '"error_type": "invalid_argument"' in content
    assert '"exception": "InvalidArgumentError"' in content
    assert '"received": "int"' in content


def test_raise_logged_raises_when_disabled():
    error = InvalidRangeError("bad range", {"min": 2, "max": 1})
    with pytest.raises(InvalidRangeError) as excinfo:
        raise_logged("randomness", error)
    assert excinfo.value is error


def test_log_function_passes_through():
    @log_function("custom")
    def add(a, b):
        return a + b

    assert add(2, 3) == 5
    assert add.__name__ == "add"


def test_close_detaches_handler_and_disables(tmp_path: Path):
    logger = DebugLogger.initialize(enabled=True, log_dir=tmp_path)
    package_logger = logging.getLogger("vibe")
    handler_count = len(package_logger.handlers)

    logger.close()
    logger.close()

    assert len(package_logger.handlers) == handler_count - 1
    assert logger.enabled is False


def test_default_log_dir_from_config(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(config, "LOGS_DIR", tmp_path / "logs")

    logger = DebugLogger.initialize(enabled=True)
    logger.close()

    assert logger.log_file.parent == tmp_path / "logs"


def test_initialize_prunes_old_traces(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(config, "LOG_RETENTION_LIMIT", 2)
    old = time.time() - 1000
    for index in range(3):
        path = tmp_path / f"vibe_debug_old{index}.log"
        path.write_text("x", encoding="utf-8")
        os.utime(path, (old + index, old + index))

    logger = DebugLogger.initialize(enabled=True, log_dir=tmp_path)

    remaining = sorted(p.name for p in tmp_path.glob("vibe_debug_*.log"))
    assert len(remaining) == 2
    assert logger.log_file.name in remaining
    assert "vibe_debug_old2.log" in remaining


def test_prune_old_logs_keeps_newest(tmp_path: Path):
    now = time.time()
    for index in range(5):
        path = tmp_path / f"vibe_debug_{index}.log"
        path.write_text("x", encoding="utf-8")
        os.utime(path, (now - 100 + index, now - 100 + index))
    (tmp_path / "notes.txt").write_text("keep", encoding="utf-8")
    (tmp_path / "other.log").write_text("keep", encoding="utf-8")

    prune_old_logs(tmp_path, keep=2)

    remaining = sorted(p.name for p in tmp_path.iterdir())
    assert remaining == ["notes.txt", "other.log", "vibe_debug_3.log", "vibe_debug_4.log"]


def test_prune_old_logs_ignores_missing_dir(tmp_path: Path):
    prune_old_logs(tmp_path / "missing", keep=1)
    prune_old_logs(tmp_path, keep=0)
