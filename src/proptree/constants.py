"""Shared constants for proptree.

Single source of truth for the engine's default limits. Placing them here
keeps config, strategies and runners free of circular imports.

Constants are grouped by domain:
- Size limits: bounds on collection lengths
- Composition limits: arity of tuple strategies
- Runner limits: case counts, reject and shrink budgets
- Exhaustive limits: path budget for depth-first exploration

Python 3.13+. Zero external dependencies.
"""

import sys

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Size limits
    "MAX_SIZE",
    "DEFAULT_SIZE_LOW",
    "DEFAULT_SIZE_HIGH",
    # Composition limits
    "MIN_TUPLE_ARITY",
    "MAX_TUPLE_ARITY",
    # Integer limits
    "DEFAULT_INT_MIN",
    "DEFAULT_INT_MAX",
    # Runner limits
    "DEFAULT_CASES",
    "DEFAULT_MAX_LOCAL_REJECTS",
    "DEFAULT_MAX_GLOBAL_REJECTS",
    "DEFAULT_MAX_FLAT_MAP_REGENS",
    "DEFAULT_MAX_SHRINK_ITERS",
    # Exhaustive limits
    "DEFAULT_MAX_PATHS",
    # Environment
    "ENV_PREFIX",
]

# ============================================================================
# SIZE LIMITS
# ============================================================================

# Largest representable collection length. An inclusive end equal to this
# value is treated as open-ended when converted to a half-open bound.
MAX_SIZE: int = sys.maxsize

# Default size range [0, 99], equivalent to size_range(range(0, 100)).
DEFAULT_SIZE_LOW: int = 0
DEFAULT_SIZE_HIGH: int = 99

# ============================================================================
# COMPOSITION LIMITS
# ============================================================================

MIN_TUPLE_ARITY: int = 1
MAX_TUPLE_ARITY: int = 12

# ============================================================================
# INTEGER LIMITS
# ============================================================================

# Range used by arbitrary(int): signed 64-bit.
DEFAULT_INT_MIN: int = -(2**63)
DEFAULT_INT_MAX: int = 2**63 - 1

# ============================================================================
# RUNNER LIMITS
# ============================================================================

# Successful cases required before a randomized run passes.
DEFAULT_CASES: int = 256

# Filter rejections tolerated by one runner before generation is abandoned.
DEFAULT_MAX_LOCAL_REJECTS: int = 65536

# Body rejections (failed assumptions) tolerated by one run.
DEFAULT_MAX_GLOBAL_REJECTS: int = 1024

# Regeneration budget for flattened strategies.
DEFAULT_MAX_FLAT_MAP_REGENS: int = 1_000_000

# Upper bound on simplify/complicate iterations while minimizing one failure.
DEFAULT_MAX_SHRINK_ITERS: int = 65536

# ============================================================================
# EXHAUSTIVE LIMITS
# ============================================================================

# Paths explored before exhaustive execution gives up on proving coverage.
DEFAULT_MAX_PATHS: int = 100_000

# ============================================================================
# ENVIRONMENT
# ============================================================================

# Prefix for configuration overrides read by Config.from_env().
ENV_PREFIX: str = "PROPTREE_"
