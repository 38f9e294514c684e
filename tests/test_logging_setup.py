from __future__ import annotations

import logging

from squash.common.logging_setup import setup_logging


def test_setup_logging_accepts_level_names() -> None:
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

        setup_logging("not-a-level")
        assert root.level == logging.INFO

        setup_logging(logging.WARNING)
        assert root.level == logging.WARNING
    finally:
        root.handlers[:], level = saved
        root.setLevel(level)
