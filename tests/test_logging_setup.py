import logging

import pytest

from problemlog import logging_setup


def test_configure_logging_installs_single_handler(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(logging_setup, "_configured", False)
    monkeypatch.setattr(logging_setup, "_handler", None)
    before = list(root.handlers)
    original_level = root.level
    try:
        logging_setup.configure_logging("DEBUG")
        logging_setup.configure_logging("INFO")
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert root.level == logging.INFO
    finally:
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
        root.setLevel(original_level)


def test_set_level_rejects_unknown_names():
    with pytest.raises(ValueError):
        logging_setup.set_level("LOUD")
