"""
Library-wide defaults.

`TensorConfig` holds the defaults used when callers leave a choice open:
the element kind of new dense tensors and the lock policy built for
concurrency shells created without an explicit policy.

Defaults can be overridden through the environment:

- ``KEYTENSOR_DEFAULT_KIND``: an element kind name, e.g. ``int32``.
- ``KEYTENSOR_LOCK_POLICY``: ``mutex``, ``read_write`` or ``striped``.
- ``KEYTENSOR_LOCK_STRIPES``: positive integer stripe count.

The active configuration is read from the environment on first use and can
be replaced programmatically with `set_config`.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from typing_extensions import Self

from ...domain._element_kind import ElementKind

LOCK_POLICIES = ("mutex", "read_write", "striped")

ENV_DEFAULT_KIND = "KEYTENSOR_DEFAULT_KIND"
ENV_LOCK_POLICY = "KEYTENSOR_LOCK_POLICY"
ENV_LOCK_STRIPES = "KEYTENSOR_LOCK_STRIPES"


@dataclass(frozen=True)
class TensorConfig:
    """
    Immutable set of library defaults.

    Attributes
    ----------
    default_element_kind : ElementKind
        Kind used by `create_dense` when no kind is given.
    lock_policy : str
        Policy built by `with_concurrency` when no policy is given.
    lock_stripes : int
        Stripe count for the "striped" policy.

    Raises
    ------
    ValueError
        If any field holds an unsupported value.
    """

    default_element_kind: ElementKind = ElementKind.FLOAT64
    lock_policy: str = "striped"
    lock_stripes: int = 16

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "default_element_kind", ElementKind.parse(self.default_element_kind)
        )
        if self.lock_policy not in LOCK_POLICIES:
            raise ValueError(
                f"Unknown lock policy {self.lock_policy!r}. Expected one of {LOCK_POLICIES}"
            )
        if int(self.lock_stripes) < 1:
            raise ValueError(f"lock_stripes must be >= 1, got {self.lock_stripes}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Self:
        """
        Build a configuration from environment variables.

        Parameters
        ----------
        environ : Mapping[str, str], optional
            Variables to read. Defaults to `os.environ`.

        Raises
        ------
        ValueError
            If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        config = cls()
        if ENV_DEFAULT_KIND in env:
            config = replace(config, default_element_kind=ElementKind.parse(env[ENV_DEFAULT_KIND]))
        if ENV_LOCK_POLICY in env:
            config = replace(config, lock_policy=env[ENV_LOCK_POLICY].strip().lower())
        if ENV_LOCK_STRIPES in env:
            raw = env[ENV_LOCK_STRIPES]
            try:
                stripes = int(raw)
            except ValueError:
                raise ValueError(f"{ENV_LOCK_STRIPES} must be an integer, got {raw!r}") from None
            config = replace(config, lock_stripes=stripes)
        return config


_config: Optional[TensorConfig] = None
_config_lock = threading.Lock()


def get_config() -> TensorConfig:
    """
    Return the active configuration, reading the environment on first use.
    """
    global _config
    with _config_lock:
        if _config is None:
            _config = TensorConfig.from_env()
        return _config


def set_config(config: Optional[TensorConfig]) -> None:
    """
    Replace the active configuration. Passing None re-reads the environment
    on next use.
    """
    global _config
    with _config_lock:
        _config = config
