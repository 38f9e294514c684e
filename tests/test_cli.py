from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from squash import cli
from squash.common.config import DEFAULTS, load_cfg


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_load_cfg_missing_file_gives_defaults(tmp_path: Path) -> None:
    assert load_cfg(str(tmp_path / "nope.yaml")) == DEFAULTS


def test_load_cfg_overrides(tmp_path: Path) -> None:
    cfg_file = tmp_path / "squash.yaml"
    cfg_file.write_text("ollama_address: http://gpu:11434\ntimeout: 30\nwebhook_url:\n", encoding="utf-8")
    cfg = load_cfg(str(cfg_file))
    assert cfg["ollama_address"] == "http://gpu:11434"
    assert cfg["timeout"] == 30
    assert cfg["keep_alive"] == "30s"
    assert cfg["webhook_url"] is None


def test_load_cfg_rejects_non_mapping(tmp_path: Path) -> None:
    cfg_file = tmp_path / "squash.yaml"
    cfg_file.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_cfg(str(cfg_file))


def test_convert_command(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = cli.main(["--cfg", str(tmp_path / "none.yaml"), "convert", "2", "megabyte", "kilobyte"])
    assert rc == 0
    assert capsys.readouterr().out.strip().endswith("2000 kilobyte")


def test_calc_command_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = cli.main(["--cfg", str(tmp_path / "none.yaml"), "calc", "1", "%", "2"])
    assert rc == 1
    assert "Unknown operator" in capsys.readouterr().err


def test_binary_convert_unknown_unit(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = cli.main(["--cfg", str(tmp_path / "none.yaml"), "convert", "1", "byte", "kilobyte", "--binary"])
    assert rc == 1
    assert "byte" in capsys.readouterr().err


def test_webhook_without_url(tmp_path: Path) -> None:
    assert cli.main(["--cfg", str(tmp_path / "none.yaml"), "webhook", "--message", "hi"]) == 1


def test_calc_division_by_zero_exits_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = cli.main(["--cfg", str(tmp_path / "none.yaml"), "calc", "1", "/", "0"])
    assert rc == 1
    assert "Division by zero" in capsys.readouterr().err
