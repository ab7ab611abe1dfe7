# exporter.py
from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Union

from profile_composer.view_model import PageView

if TYPE_CHECKING:
    from profile_composer.api import SiteView


class ExportError(Exception):
    """Raised when an export target cannot be written."""


def site_to_json(view: Union[SiteView, PageView]) -> dict:
    return view.as_json()


def dumps(view: Union[SiteView, PageView]) -> str:
    # ensure_ascii=False keeps "•" and similar display characters readable.
    return json.dumps(site_to_json(view), indent=2, ensure_ascii=False)


def write_json(view: Union[SiteView, PageView], path: Path) -> None:
    path = Path(path)
    if path.exists() and path.is_dir():
        raise ExportError(f"export target is a directory: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        f.write(dumps(view))
        f.write("\n")
