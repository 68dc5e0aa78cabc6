import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module; anything unknown falls back to development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "school_dashboard.config.production"

    if env in {"test", "testing"}:
        return "school_dashboard.config.testing"

    return "school_dashboard.config.development"
