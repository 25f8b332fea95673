import os
from typing import Optional

_MODULES_BY_ENV = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: Optional[str] = None) -> str:
    """Dotted path of the settings module for ``env`` (defaults to $APP_ENV).

    Unknown or unset environments fall back to ``config.development``.
    """

    if env is None:
        env = os.getenv("APP_ENV", "")
    return _MODULES_BY_ENV.get(env.strip().lower(), "config.development")
