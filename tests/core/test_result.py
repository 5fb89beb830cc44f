"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning() method
    - Provenance metadata contains expected version keys
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

import pysubsets
from pysubsets.core.result import Result, _default_provenance


# ═══════════════════════════════════════════════════════════════════════
# Test payload types
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu",
    )
    defaults.update(kwargs)
    return Result(**defaults)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"method": "exhaustive"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_exhaustive",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "exhaustive"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_exhaustive"

    def test_timing_with_breakdown(self):
        result = _result(
            timing={"total_seconds": 1.0, "enumeration": 0.9, "statistics": 0.1},
        )
        assert result.timing["enumeration"] == 0.9


# ═══════════════════════════════════════════════════════════════════════
# Default factories
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:
    """Default values for warnings and provenance."""

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_has_warning(self):
        result = _result(warnings=("AICc undefined at size 3", "ill-conditioned"))
        assert result.has_warning("AICc")
        assert not result.has_warning("converge")

    def test_provenance_auto_generated(self):
        result = _result()
        assert result.provenance["pysubsets_version"] == pysubsets.__version__
        assert "numpy_version" in result.provenance
        assert "scipy_version" in result.provenance

    def test_provenance_explicit_override(self):
        result = _result(provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}

    def test_default_provenance_fresh_dict(self):
        assert _default_provenance() is not _default_provenance()


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestImmutability:
    """Result is frozen; attributes cannot be reassigned."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)
