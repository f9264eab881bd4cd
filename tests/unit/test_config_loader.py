"""
Unit tests for ConfigLoader
"""
import pytest

from linguaflix.config import ConfigLoader


@pytest.fixture
def user_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "cache:\n"
        "  default_ttl: 600\n"
        "proficiency:\n"
        "  beginner:\n"
        "    max_length: 6\n",
        encoding="utf-8"
    )
    return path


def test_defaults_are_loaded_without_user_config(tmp_path):
    loader = ConfigLoader(user_config_path=str(tmp_path / "absent.yaml"), environ={})

    assert loader.get("cache", "default_ttl") == 86400
    assert loader.get("cache.cleanup_interval") == 120
    assert loader.get("analysis", "spacy_model") == "en_core_web_sm"
    assert loader.get("missing", "key", default="fallback") == "fallback"


def test_user_config_is_merged_over_defaults(user_config):
    loader = ConfigLoader(user_config_path=str(user_config), environ={})

    assert loader.get("cache", "default_ttl") == 600
    assert loader.get("cache", "cleanup_interval") == 120
    assert loader.get("proficiency", "beginner", "max_length") == 6
    assert loader.get("proficiency", "beginner", "max_complex_words") == 2


def test_env_overrides_match_keys_containing_underscores(user_config):
    loader = ConfigLoader(
        user_config_path=str(user_config),
        environ={
            "LINGUAFLIX_CACHE_DEFAULT_TTL": "30",
            "LINGUAFLIX_ANALYSIS_MAX_WORKERS": "4",
            "LINGUAFLIX_SUBTITLE_ENCODING": "auto",
            "OTHER_CACHE_DEFAULT_TTL": "1",
        }
    )

    assert loader.get("cache", "default_ttl") == 30
    assert loader.get("analysis", "max_workers") == 4
    assert loader.get("subtitle", "encoding") == "auto"


def test_env_override_values_are_typed(tmp_path):
    loader = ConfigLoader(
        user_config_path=str(tmp_path / "absent.yaml"),
        environ={
            "LINGUAFLIX_CUSTOM_RATIO": "0.5",
            "LINGUAFLIX_CUSTOM_ENABLED": "true",
        }
    )

    assert loader.get("custom", "ratio") == 0.5
    assert loader.get("custom", "enabled") is True


def test_env_override_cannot_nest_under_a_scalar(tmp_path):
    loader = ConfigLoader(
        user_config_path=str(tmp_path / "absent.yaml"),
        environ={"LINGUAFLIX_ANALYSIS_SPACY_MODEL_NAME": "x"}
    )

    # 'spacy_model' is matched first and is a string, so nothing can nest under it
    assert loader.get("analysis", "spacy_model") == "en_core_web_sm"


def test_invalid_user_yaml_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("cache: [unclosed", encoding="utf-8")

    loader = ConfigLoader(user_config_path=str(path), environ={})

    assert loader.get("cache", "default_ttl") == 86400
