from __future__ import annotations
import os
from typing import Iterable

from wahlberg.errors import WahlbergConfigError


# Integer overflow policies understood by wahlberg.types.int64
OVERFLOW_ERROR = 'error'
OVERFLOW_WRAP = 'wrap'
OVERFLOW_POLICIES = (OVERFLOW_ERROR, OVERFLOW_WRAP)

# Defaults
_DEFAULT_OVERFLOW = OVERFLOW_ERROR


def choice_from_env(var: str, choices: Iterable[str], default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    value = raw.strip().lower()
    if value not in choices:
        raise WahlbergConfigError(f"{var}={raw!r} is not one of {', '.join(choices)}")
    return value


def check_overflow_policy(policy: str) -> str:
    if policy not in OVERFLOW_POLICIES:
        raise WahlbergConfigError(f"unknown overflow policy {policy!r}")
    return policy


def get_overflow_policy() -> str:
    return choice_from_env('WAHLBERG_OVERFLOW', OVERFLOW_POLICIES, _DEFAULT_OVERFLOW)
