"""
Library-wide defaults and their environment overrides.
"""

from ._config import (
    ENV_DEFAULT_KIND,
    ENV_LOCK_POLICY,
    ENV_LOCK_STRIPES,
    LOCK_POLICIES,
    TensorConfig,
    get_config,
    set_config,
)

__all__ = [
    "ENV_DEFAULT_KIND",
    "ENV_LOCK_POLICY",
    "ENV_LOCK_STRIPES",
    "LOCK_POLICIES",
    TensorConfig.__name__,
    get_config.__name__,
    set_config.__name__,
]
