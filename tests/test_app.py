"""Tests for command-line parsing and startup configuration."""

import json

from ZoomPanViewer import app
from ZoomPanViewer.core.config import ViewerConfig


def test_parse_args_defaults():
    args = app.parse_args([])
    assert args.image is None
    assert args.config is None
    assert args.start_zoom is None
    assert args.log_level == "INFO"


def test_parse_args_values():
    args = app.parse_args(["board.png", "--config", "framing.json", "--log-level", "DEBUG"])
    assert args.image == "board.png"
    assert args.config == "framing.json"
    assert args.log_level == "DEBUG"


def test_build_config_defaults():
    assert app.build_config(None) == ViewerConfig()


def test_build_config_from_file(tmp_path):
    path = tmp_path / "framing.json"
    path.write_text(json.dumps({"start_zoom": 1.0}), encoding="utf-8")
    assert app.build_config(str(path)).start_zoom == 1.0


def test_start_zoom_overrides_config_file(tmp_path):
    path = tmp_path / "framing.json"
    path.write_text(json.dumps({"start_zoom": 3.0, "max_scale": 4}), encoding="utf-8")
    config = app.build_config(str(path), start_zoom=1.25)
    assert config.start_zoom == 1.25
    assert config.max_scale == 4.0
    assert app.build_config(None, start_zoom=0.5).start_zoom == 0.5


def test_parse_start_zoom():
    assert app.parse_args(["--start-zoom", "1.5"]).start_zoom == 1.5


def test_main_rejects_invalid_start_zoom():
    assert app.main(["--start-zoom", "0", "--log-level", "WARNING"]) == 1


def test_main_rejects_invalid_config(tmp_path):
    path = tmp_path / "framing.json"
    path.write_text(json.dumps({"min_scale": 5, "max_scale": 1}), encoding="utf-8")
    assert app.main(["--config", str(path), "--log-level", "WARNING"]) == 1
