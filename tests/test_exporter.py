import json
from pathlib import Path

import pytest

from profile_composer.api import build_site
from profile_composer.config import AppConfig
from profile_composer.exporter import ExportError, dumps, write_json


def test_write_json_writes_site(tmp_path: Path):
    site = build_site(AppConfig())
    out = tmp_path / "out" / "site.json"
    write_json(site, out)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert sorted(data["pages"]) == ["profile", "projects", "timeline"]
    assert data["warnings"] == list(site.warnings)


def test_dumps_keeps_display_characters():
    site = build_site(AppConfig())
    text = dumps(site.pages["profile"])
    assert "Redmond, WA • Nov 2021 - Present" in text


def test_write_json_refuses_directory(tmp_path: Path):
    site = build_site(AppConfig())
    with pytest.raises(ExportError):
        write_json(site, tmp_path)
