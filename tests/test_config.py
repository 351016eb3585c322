import pytest

from config import ConfigError, get_settings_module, weekdays_from_env


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("development", "config.development"),
        ("anything-else", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_weekdays_from_env(monkeypatch):
    monkeypatch.setenv("BOOKABLE_WEEKDAYS", "2, 4,5,7")

    assert weekdays_from_env("BOOKABLE_WEEKDAYS") == (2, 4, 5, 7)


def test_weekdays_from_env_empty_means_no_restriction(monkeypatch):
    monkeypatch.delenv("BOOKABLE_WEEKDAYS", raising=False)

    assert weekdays_from_env("BOOKABLE_WEEKDAYS") == ()


@pytest.mark.parametrize("raw", ["tue,thu", "2,8", "0"])
def test_weekdays_from_env_rejects_bad_values(monkeypatch, raw):
    monkeypatch.setenv("BOOKABLE_WEEKDAYS", raw)

    with pytest.raises(ConfigError, match="BOOKABLE_WEEKDAYS"):
        weekdays_from_env("BOOKABLE_WEEKDAYS")
