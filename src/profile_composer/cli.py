from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, List, Optional

from profile_composer.exporter import dumps, write_json
from profile_composer.pages import PAGE_KEYS


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="profile-composer",
        description="Assemble the profile site's page view-models from the built-in content.",
    )
    subparsers = ap.add_subparsers(dest="command", required=True)

    pages = subparsers.add_parser("pages", help="List the page keys that can be assembled.")
    pages.set_defaults(func=_cmd_pages)

    render = subparsers.add_parser("render", help="Emit the JSON view-model of the page a path resolves to.")
    _add_render_args(render)
    render.set_defaults(func=_cmd_render)

    build = subparsers.add_parser("build", help="Emit every page plus consistency warnings as JSON.")
    _add_common_args(build)
    build.set_defaults(func=_cmd_build)

    check = subparsers.add_parser("check", help="Validate taxonomy, config and content.")
    check.add_argument("--config", default=None, help="Optional YAML/JSON/TOML config override (merged with pyproject.toml).")
    check.set_defaults(func=_cmd_check)

    args = ap.parse_args(argv)
    try:
        return args.func(args)
    except ValueError as e:
        # ConfigurationError and ValidationError both land here.
        print(str(e), file=sys.stderr)
        return 2


# ---------------- CLI subcommands ----------------


def _add_common_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("--config", default=None, help="Optional YAML/JSON/TOML config override (merged with pyproject.toml).")
    ap.add_argument("--output", "-o", default=None, help="Output path (JSON). If omitted, JSON is printed to stdout.")
    ap.add_argument("--verbose", "-v", action="store_true", help="Log assembly steps to stderr.")


def _add_render_args(ap: argparse.ArgumentParser) -> None:
    ap.add_argument("path", nargs="?", default="/", help="Requested path, e.g. /projects (unknown paths fall back to the default page).")
    _add_common_args(ap)
    ap.epilog = _RENDER_EPILOG


def _stderr_logger(enabled: bool) -> Optional[Callable[[str], None]]:
    if not enabled:
        return None

    def logger(msg: str) -> None:
        print(msg, file=sys.stderr)

    return logger


def _emit(view, output: Optional[str]) -> None:
    if output:
        write_json(view, Path(output))
    else:
        print(dumps(view))


def _cmd_pages(args: argparse.Namespace) -> int:
    for key in PAGE_KEYS:
        print(key)
    return 0


def _load_api():
    # Content records validate on import; importing here keeps their errors on the exit-2 path.
    from profile_composer import api

    return api


def _cmd_render(args: argparse.Namespace) -> int:
    api = _load_api()
    view = api.render_path(
        args.path,
        config_path=Path(args.config) if args.config else None,
        logger=_stderr_logger(args.verbose),
    )
    _emit(view, args.output)
    return 0


def _cmd_build(args: argparse.Namespace) -> int:
    api = _load_api()
    site = api.build_site(
        config_path=Path(args.config) if args.config else None,
        logger=_stderr_logger(args.verbose),
    )
    _emit(site, args.output)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    site = _load_api().build_site(config_path=Path(args.config) if args.config else None)
    for w in site.warnings:
        print(w)
    return 1 if site.warnings else 0


_RENDER_EPILOG = """examples:
  profile-composer render /projects
  profile-composer render /timeline --output timeline.json --verbose

stable JSON schema (page):
  {
    "page": "profile" | "projects" | "timeline",
    "title": "<string>",
    "subtitle": "<string>",
    "theme": {"primary": "#rrggbb", "secondary": "#rrggbb", "header_gradient": [...]},
    "navigation": [{"label": "...", "page": "...", "path": "..."}],
    "groups": [{"key", "label", "icon", "items": [...], "divider_after"}],
    "entries": [{"kind", "title", "subtitle", "meta", "icon", "description",
                 "metrics": [...], "achievements": [...], "technologies": [...], "divider_after"}],
    "metrics": [{"label", "value", "icon", "tone"}]
  }
"""


if __name__ == "__main__":
    raise SystemExit(main())
