"""proptree - composable value generation and shrinking for property tests.

Strategies describe how to produce values; value trees are live candidates
that can be simplified toward a minimal counterexample. Properties run under
a randomized backend (seeded draws, failures minimized by simplify/complicate)
or an exhaustive backend (every choice sequence enumerated depth-first).

Public API:
    Strategy, ValueTree - Generation and shrinking contracts
    Just, integers, booleans - Leaf strategies
    tuples, vec, one_of - Composition
    vec_deque, binary_heap - Deques and heaps built on vec
    hash_set, hash_map, sorted_set, sorted_map - Sets and dicts built on vec
    SizeRange, size_range - Collection size bounds
    arbitrary - Default strategy for a Python type
    TestRunner, run - Randomized runs with shrinking
    ExhaustiveRunner, run_exhaustive - Exhaustive exploration
    proptest, compose, compose_flat - Declarative layer
    prop_assume, prop_assert, prop_assert_eq, prop_assert_ne - Body verdicts
    Config, Backend - Run configuration

Exceptions:
    ProptreeError - Base exception class
    GenerationRejectedError - A strategy could not produce a value
    TestCaseRejected, TestCaseFailed - Verdicts raised by property bodies
    PropertyFailedError, TestAbortedError, PathLimitExceededError - Run outcomes
    EngineIntegrityError - Engine contract violations (AssertionError subclass)

Submodules:
    proptree.strategy - Adaptors (map, filter, fuse, flatten, union)
    proptree.collection - Bounded collections
    proptree.diagnostics - Error codes and templates
    proptree.interop.hypothesis - Hypothesis bridge (optional dependency)
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .arbitrary import arbitrary
from .collection import (
    SizeRange,
    binary_heap,
    hash_map,
    hash_set,
    size_range,
    sorted_map,
    sorted_set,
    vec,
    vec_deque,
)
from .config import Config
from .diagnostics import (
    GenerationRejectedError,
    PathLimitExceededError,
    PropertyFailedError,
    ProptreeError,
    TestAbortedError,
    TestCaseError,
    TestCaseFailed,
    TestCaseRejected,
    TestRunError,
)
from .enums import Backend
from .integrity import EngineIntegrityError
from .num import booleans, integers
from .runner import ExhaustiveRunner, TestRunner, run, run_exhaustive, run_property
from .strategy import Just, Strategy, ValueTree, as_strategy
from .sugar import (
    compose,
    compose_flat,
    destructure,
    one_of,
    prop_assert,
    prop_assert_eq,
    prop_assert_ne,
    prop_assume,
    proptest,
)
from .tuple import tuples

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("proptree")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Backend",
    "Config",
    "EngineIntegrityError",
    "ExhaustiveRunner",
    "GenerationRejectedError",
    "Just",
    "PathLimitExceededError",
    "PropertyFailedError",
    "ProptreeError",
    "SizeRange",
    "Strategy",
    "TestAbortedError",
    "TestCaseError",
    "TestCaseFailed",
    "TestCaseRejected",
    "TestRunError",
    "TestRunner",
    "ValueTree",
    "__version__",
    "arbitrary",
    "as_strategy",
    "binary_heap",
    "booleans",
    "compose",
    "compose_flat",
    "destructure",
    "hash_map",
    "hash_set",
    "integers",
    "one_of",
    "prop_assert",
    "prop_assert_eq",
    "prop_assert_ne",
    "prop_assume",
    "proptest",
    "run",
    "run_exhaustive",
    "run_property",
    "size_range",
    "sorted_map",
    "sorted_set",
    "tuples",
    "vec",
    "vec_deque",
]
