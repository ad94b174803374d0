"""Environment driven switches for the outer drill layers.

A seed always produces the same scenario whatever the flags say; flags only
change what the service reveals or how a client renders it.

Usage::

    from pokerdrill.core import feature_flags

    if feature_flags.is_enabled(feature_flags.HIDE_BRANCH_KEY):
        ...

``POKERDRILL_FEATURES`` holds a comma-separated, case-insensitive list of
flag names.  Tests pin flags with :func:`override`; the innermost block wins.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Final

__all__ = ["HIDE_BRANCH_KEY", "active_flags", "is_enabled", "override", "set_env_flags"]

ENV_VAR: Final = "POKERDRILL_FEATURES"

# Withhold the branch key from public drill payloads until the answer is in.
HIDE_BRANCH_KEY: Final = "drill.hide_branch_key"

_pinned: list[dict[str, bool]] = []


def _key(flag: str) -> str:
    return flag.strip().lower()


def _from_env() -> frozenset[str]:
    raw = os.getenv(ENV_VAR) or ""
    return frozenset(_key(part) for part in raw.split(",") if part.strip())


def is_enabled(flag: str) -> bool:
    key = _key(flag)
    for layer in reversed(_pinned):
        if key in layer:
            return layer[key]
    return key in _from_env()


def active_flags() -> frozenset[str]:
    """Every flag currently on, from the environment and any open overrides."""

    state = dict.fromkeys(_from_env(), True)
    for layer in _pinned:
        state.update(layer)
    return frozenset(flag for flag, on in state.items() if on)


@contextmanager
def override(*, enable: Iterable[str] = (), disable: Iterable[str] = ()) -> Iterator[None]:
    layer = {_key(flag): True for flag in enable}
    layer.update({_key(flag): False for flag in disable})
    _pinned.append(layer)
    try:
        yield
    finally:
        _pinned.pop()


def set_env_flags(flags: Iterable[str]) -> None:
    os.environ[ENV_VAR] = ",".join(sorted({_key(flag) for flag in flags}))
