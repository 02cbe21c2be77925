import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unknown means development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def page_size_options(raw: str) -> tuple:
    """Parse a comma-separated list like ``"5,10,20,50"``."""
    return tuple(int(part) for part in raw.split(",") if part.strip())
