import json

import pytest

from profile_composer.config import AppConfig, DEFAULT_METRIC_TONES, ThemeConfig, load_app_config
from profile_composer.core import ConfigurationError


def test_load_app_config_reads_defaults_from_pyproject(project_root):
    cfg = load_app_config(project_root=project_root)
    cfg.validate()

    assert cfg.default_page == "profile"
    assert cfg.metric_tones == DEFAULT_METRIC_TONES
    assert cfg.theme.primary == "#0078d4"
    assert cfg.theme.header_gradient == ("#0078d4", "#005a9e")
    assert cfg.fallback_icon_tag is None


def test_missing_pyproject_gives_defaults(tmp_path):
    cfg = load_app_config(project_root=tmp_path)
    assert cfg == AppConfig()


def test_load_app_config_json_override(tmp_path, project_root):
    override = tmp_path / "config.json"
    override.write_text(
        json.dumps(
            {
                "default_page": "Timeline",
                "strict_consistency": True,
                "theme": {"primary": "#123456"},
            }
        ),
        encoding="utf-8",
    )

    cfg = load_app_config(project_root=project_root, override_path=override)
    cfg.validate()

    assert cfg.default_page == "timeline"
    assert cfg.strict_consistency is True
    assert cfg.theme.primary == "#123456"
    # untouched theme keys still come from pyproject
    assert cfg.theme.secondary == "#005a9e"


def test_load_app_config_yaml_override(tmp_path, project_root):
    override = tmp_path / "config.yaml"
    override.write_text("metric_tones: [info, warning]\nfallback_icon_tag: code\n", encoding="utf-8")

    cfg = load_app_config(project_root=project_root, override_path=override)
    cfg.validate()

    assert cfg.metric_tones == ("info", "warning")
    assert cfg.taxonomy.fallback_icon_tag == "code"


def test_missing_override_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_app_config(project_root=tmp_path, override_path=tmp_path / "nope.json")


def test_unsupported_override_format(tmp_path):
    override = tmp_path / "config.ini"
    override.write_text("[x]\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_app_config(project_root=tmp_path, override_path=override)


def test_app_config_validation_collects_issues():
    cfg = AppConfig(
        default_page="contact",
        metric_tones=(),
        theme=ThemeConfig(primary="blue"),
    )

    with pytest.raises(ConfigurationError) as exc:
        cfg.validate()

    msg = str(exc.value)
    assert "default_page" in msg
    assert "metric_tones" in msg
    assert "theme.primary" in msg


def test_non_strict_validation_returns_issues():
    issues = AppConfig(default_page="contact").validate(strict=False)
    assert list(issues) == ["default_page"]


@pytest.mark.parametrize(
    "override, key",
    [
        ({"metric_tones": "success"}, "metric_tones"),
        ({"metric_tones": 3}, "metric_tones"),
        ({"strict_consistency": "false"}, "strict_consistency"),
        ({"fallback_icon_tag": 7}, "fallback_icon_tag"),
        ({"default_page": 1}, "default_page"),
        ({"theme": {"header_gradient": "#fff"}}, "theme.header_gradient"),
        ({"theme": {"header_gradient": ["#fff", "#000", "#111"]}}, "theme.header_gradient"),
        ({"theme": {"primary": 123456}}, "theme.primary"),
    ],
)
def test_wrongly_typed_override_values_are_reported(tmp_path, project_root, override, key):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(override), encoding="utf-8")

    cfg = load_app_config(project_root=project_root, override_path=path)

    assert key in cfg.validate(strict=False)
    with pytest.raises(ConfigurationError):
        cfg.validate()


def test_yaml_string_false_is_not_coerced(tmp_path, project_root):
    override = tmp_path / "config.yaml"
    override.write_text('strict_consistency: "false"\n', encoding="utf-8")

    cfg = load_app_config(project_root=project_root, override_path=override)

    assert cfg.strict_consistency == "false"
    assert "strict_consistency" in cfg.validate(strict=False)
