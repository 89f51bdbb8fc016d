import os

_SETTINGS_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    """Dotted path of the settings module for APP_ENV; unknown or unset means development."""
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _SETTINGS_MODULES.get(env, "config.development")
