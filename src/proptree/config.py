"""Runner configuration for proptree.

Provides a single frozen dataclass that encapsulates every knob consumed by
the randomized and exhaustive runners. Values can be overridden from the
environment so CI can tighten or widen a run without code changes.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass

from proptree.constants import (
    DEFAULT_CASES,
    DEFAULT_MAX_FLAT_MAP_REGENS,
    DEFAULT_MAX_GLOBAL_REJECTS,
    DEFAULT_MAX_LOCAL_REJECTS,
    DEFAULT_MAX_PATHS,
    DEFAULT_MAX_SHRINK_ITERS,
    ENV_PREFIX,
)
from proptree.enums import Backend

__all__ = ["Config"]

# Environment variable suffix -> Config field
_INT_ENV_FIELDS: dict[str, str] = {
    "CASES": "cases",
    "MAX_LOCAL_REJECTS": "max_local_rejects",
    "MAX_GLOBAL_REJECTS": "max_global_rejects",
    "MAX_SHRINK_ITERS": "max_shrink_iters",
    "MAX_PATHS": "max_paths",
    "SEED": "seed",
}


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable configuration for property runs.

    All fields have sensible defaults; ``Config()`` with no arguments is a
    usable configuration.

    Attributes:
        cases: Successful cases required by the randomized runner (default: 256).
        max_local_rejects: Filter rejections allowed per runner before
            generation raises GenerationRejectedError (default: 65536).
        max_global_rejects: Body rejections (failed assumptions) allowed per
            run before the run aborts (default: 1024).
        max_flat_map_regens: Regeneration budget for flattened strategies
            (default: 1000000).
        max_shrink_iters: Cap on simplify/complicate iterations while
            minimizing one failure (default: 65536). Zero disables shrinking.
        max_paths: Paths the exhaustive runner may explore before raising
            PathLimitExceededError (default: 100000).
        seed: Seed for the randomized runner's PRNG. None draws a fresh seed.
        backend: Backend used by the ``proptest`` decorator.

    Example:
        >>> config = Config(cases=32, seed=7)
        >>> config.cases
        32
        >>> config.replace(cases=64).cases
        64
    """

    cases: int = DEFAULT_CASES
    max_local_rejects: int = DEFAULT_MAX_LOCAL_REJECTS
    max_global_rejects: int = DEFAULT_MAX_GLOBAL_REJECTS
    max_flat_map_regens: int = DEFAULT_MAX_FLAT_MAP_REGENS
    max_shrink_iters: int = DEFAULT_MAX_SHRINK_ITERS
    max_paths: int = DEFAULT_MAX_PATHS
    seed: int | None = None
    backend: Backend = Backend.RANDOM

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If cases or max_paths is not positive, if a reject,
                regen or shrink budget is negative, or if backend is unknown.
        """
        if self.cases <= 0:
            msg = "cases must be positive"
            raise ValueError(msg)
        if self.max_paths <= 0:
            msg = "max_paths must be positive"
            raise ValueError(msg)
        if self.max_local_rejects < 0:
            msg = "max_local_rejects must be non-negative"
            raise ValueError(msg)
        if self.max_global_rejects < 0:
            msg = "max_global_rejects must be non-negative"
            raise ValueError(msg)
        if self.max_flat_map_regens < 0:
            msg = "max_flat_map_regens must be non-negative"
            raise ValueError(msg)
        if self.max_shrink_iters < 0:
            msg = "max_shrink_iters must be non-negative"
            raise ValueError(msg)
        # Accept plain strings ("exhaustive") as well as Backend members.
        object.__setattr__(self, "backend", Backend(self.backend))

    def replace(self, **changes: object) -> Config:
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]

    @classmethod
    def from_env(
        cls,
        base: Config | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Config:
        """Build a Config from ``PROPTREE_*`` environment overrides.

        Recognized variables: PROPTREE_CASES, PROPTREE_MAX_LOCAL_REJECTS,
        PROPTREE_MAX_GLOBAL_REJECTS, PROPTREE_MAX_SHRINK_ITERS,
        PROPTREE_MAX_PATHS, PROPTREE_SEED and PROPTREE_BACKEND.

        Args:
            base: Configuration to start from (default: ``Config()``)
            environ: Mapping to read instead of ``os.environ``

        Returns:
            New Config with overrides applied

        Raises:
            ValueError: If an override is not a valid integer or backend name
        """
        env = os.environ if environ is None else environ
        changes: dict[str, object] = {}

        for suffix, field_name in _INT_ENV_FIELDS.items():
            raw = env.get(ENV_PREFIX + suffix)
            if raw is None or raw.strip() == "":
                continue
            try:
                changes[field_name] = int(raw)
            except ValueError as e:
                msg = f"{ENV_PREFIX}{suffix} must be an integer, got {raw!r}"
                raise ValueError(msg) from e

        backend = env.get(ENV_PREFIX + "BACKEND")
        if backend:
            try:
                changes["backend"] = Backend(backend.strip().lower())
            except ValueError as e:
                valid = ", ".join(b.value for b in Backend)
                msg = f"{ENV_PREFIX}BACKEND must be one of {valid}, got {backend!r}"
                raise ValueError(msg) from e

        return (base or cls()).replace(**changes)
