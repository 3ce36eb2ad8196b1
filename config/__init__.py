import os

_ENVIRONMENTS = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: str | None = None) -> str:
    """Settings module for APP_ENV (or `env`); anything unknown means development."""
    env = (env or os.getenv("APP_ENV", "development")).strip().lower()
    return _ENVIRONMENTS.get(env, "config.development")
