import os


class ConfigError(ValueError):
    """Raised when an environment setting cannot be parsed."""


def get_settings_module() -> str:
    # APP_ENV chooses the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def weekdays_from_env(name: str, default: str = "") -> tuple[int, ...]:
    """Read a comma separated list of ISO weekday numbers, e.g. "2,4,5,7"."""
    raw = os.getenv(name, default)
    try:
        days = tuple(int(part) for part in raw.split(",") if part.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must list ISO weekday numbers 1-7, got {raw!r}") from e
    if any(not 1 <= d <= 7 for d in days):
        raise ConfigError(f"{name} must list ISO weekday numbers 1-7, got {raw!r}")
    return days
