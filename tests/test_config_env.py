from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from regexcollection.config import load_config
from regexcollection.config.schema import CONFIG_ENV, OUTPUT_FORMAT_ENV


def test_config_file_from_env(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("scan:\n  max_matches: 3\n")
    monkeypatch.setenv(CONFIG_ENV, str(cfg_file))
    cfg = load_config()
    assert cfg.scan.max_matches == 3


def test_explicit_path_beats_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / "env.yml"
    env_file.write_text("scan:\n  max_matches: 3\n")
    arg_file = tmp_path / "arg.yml"
    arg_file.write_text("scan:\n  max_matches: 7\n")
    cfg = load_config(arg_file, env={CONFIG_ENV: str(env_file)})
    assert cfg.scan.max_matches == 7


def test_output_format_env_overrides_file(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("output:\n  format: text\n")
    cfg = load_config(cfg_file, env={OUTPUT_FORMAT_ENV: "json"})
    assert cfg.output.format == "json"


def test_output_format_env_validated() -> None:
    with pytest.raises(ValidationError):
        load_config(env={OUTPUT_FORMAT_ENV: "yaml"})


def test_missing_env_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(env={CONFIG_ENV: str(tmp_path / "missing.yml")})
