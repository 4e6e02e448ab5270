"""
Runtime configuration.

Values are read from the environment once, at import time:
- CRYPTOMATH_LOG_LEVEL   log level name (default WARNING)
- CRYPTOMATH_LOG_JSON    "true"/"1"/"yes" for JSON log lines
- CRYPTOMATH_MR_ROUNDS   default Miller-Rabin rounds (default 40)
"""

import os

_ENV_PREFIX = "CRYPTOMATH"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MILLER_RABIN_ROUNDS = 40

# Largest value of a signed 64-bit machine integer
INT64_MAX = 2 ** 63 - 1


def _env(name: str, default: str) -> str:
    return os.environ.get(f"{_ENV_PREFIX}_{name}", default)


def _env_bool(name: str, default: bool = False) -> bool:
    raw = _env(name, "true" if default else "false")
    return raw.strip().lower() in ("true", "1", "yes")


def _env_positive_int(name: str, default: int) -> int:
    try:
        value = int(_env(name, str(default)))
    except ValueError:
        return default
    return value if value > 0 else default


LOG_LEVEL = _env("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
LOG_JSON = _env_bool("LOG_JSON")
MILLER_RABIN_ROUNDS = _env_positive_int("MR_ROUNDS", DEFAULT_MILLER_RABIN_ROUNDS)
