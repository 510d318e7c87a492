# tests/unit/test_cli.py

from __future__ import annotations
import json
import sys
from pathlib import Path
import pytest
from typer.testing import CliRunner

# Ensure "src" is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import gcecloud.bootstrap as bootstrap
from gcecloud.cli import app  # Typer app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.setattr(bootstrap, "load_dotenv", lambda *a, **k: False)
    monkeypatch.delenv("GCE_COMPUTE_ENDPOINT", raising=False)
    monkeypatch.delenv("GCE_API_VERSION", raising=False)


def test_endpoint_from_base():
    result = runner.invoke(
        app, ["endpoint", "--base", "https://www.googleapis.com/compute/staging_v1/", "--variant", "alpha"]
    )
    assert result.exit_code == 0
    assert result.output.strip() == "https://www.googleapis.com/compute/staging_alpha/"


def test_endpoint_from_config(tmp_path: Path):
    cfg = tmp_path / "default.yaml"
    cfg.write_text(
        "compute:\n  endpoint: https://www.googleapis.com/compute/v1/\n  api_version: beta\n",
        encoding="utf-8",
    )
    result = runner.invoke(app, ["endpoint", "--config", str(cfg)])
    assert result.exit_code == 0
    assert result.output.strip() == "https://www.googleapis.com/compute/beta/"


def test_endpoint_malformed_base_exits_2():
    result = runner.invoke(app, ["endpoint", "--base", "https://www.googleapis.com/", "--variant", "v1"])
    assert result.exit_code == 2


def test_classify_match_and_miss(tmp_path: Path):
    body = tmp_path / "err.json"
    body.write_text(json.dumps({"error": {"code": 404, "message": "gone", "errors": [{"reason": "notFound"}]}}))

    hit = runner.invoke(app, ["classify", str(body), "notFound", "--status", "404"])
    assert hit.exit_code == 0
    assert hit.output.strip() == "true"

    miss = runner.invoke(app, ["classify", str(body), "alreadyExists"])
    assert miss.exit_code == 1
    assert miss.output.strip() == "false"


def test_classify_missing_body_file(tmp_path: Path):
    result = runner.invoke(app, ["classify", str(tmp_path / "nope.json"), "notFound"])
    assert result.exit_code == 2


def test_endpoint_unparsable_base_exits_2():
    result = runner.invoke(app, ["endpoint", "--base", "https://[::1/compute/v1/", "--variant", "beta"])
    assert result.exit_code == 2
