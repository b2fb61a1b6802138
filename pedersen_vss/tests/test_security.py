"""
⚠️ DRAFT — requires crypto review before production use

Unit tests for security utilities module.

Tests randomness, hashing, encoding helpers and constant-time operations.
"""

import hashlib
import os

import pytest

from pedersen_vss import security
from pedersen_vss.exceptions import CryptographicError, RandomnessError
from pedersen_vss.group import DEFAULT_GROUP


class _FailingSystemRandom:
    """Stand-in for an unavailable OS entropy source."""

    def randrange(self, start, stop):
        raise OSError("entropy source unavailable")


class _ScriptedSystemRandom:
    """Returns queued values, to exercise rejection sampling."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.values.pop(0)


class TestRandomnessSource:
    """Test cryptographically secure randomness source."""

    def test_init(self):
        """Test RandomnessSource initialization."""
        rng = security.RandomnessSource()
        assert rng._pid == os.getpid()
        assert rng._rng is not None

    def test_random_below(self):
        """Values fall in [0, max_value)."""
        rng = security.RandomnessSource()

        value = rng.random_below(1000)
        assert 0 <= value < 1000
        assert isinstance(value, int)

    def test_random_nonzero_below_range(self):
        """Values fall in (0, n - 1) for small bounds."""
        rng = security.RandomnessSource()

        results = [rng.random_nonzero_below(5) for _ in range(500)]
        assert all(0 < r < 4 for r in results)
        assert set(results) == {1, 2, 3}

    def test_random_nonzero_below_group_order(self):
        """Values for the group order stay in [1, q-1]."""
        rng = security.RandomnessSource()

        for _ in range(20):
            r = rng.random_nonzero_below(DEFAULT_GROUP.q)
            assert 1 <= r <= DEFAULT_GROUP.q - 1

    def test_never_returns_zero(self):
        """Smallest legal bound still never yields zero."""
        rng = security.RandomnessSource()

        assert all(rng.random_nonzero_below(3) == 1 for _ in range(200))

    def test_rejection_redraws_zero(self):
        """Zero draws are rejected and redrawn."""
        rng = security.RandomnessSource()
        scripted = _ScriptedSystemRandom([0, 0, 0, 7])
        rng._rng = scripted

        assert rng.random_nonzero_below(100) == 7
        assert scripted.calls == [(0, 99)] * 4

    def test_outputs_vary(self):
        """Repeated draws with the same bound differ."""
        rng = security.RandomnessSource()

        results = {rng.random_nonzero_below(DEFAULT_GROUP.p) for _ in range(10)}
        assert len(results) == 10

    @pytest.mark.parametrize("bound", [-5, 0, 1, 2])
    def test_invalid_bound_raises(self, bound):
        """Bounds that leave no nonzero value are rejected."""
        rng = security.RandomnessSource()

        with pytest.raises(ValueError, match="bound must be > 2"):
            rng.random_nonzero_below(bound)

    @pytest.mark.parametrize("bound", [10.0, "10", True])
    def test_non_int_bound_raises(self, bound):
        """Bound must be an int."""
        rng = security.RandomnessSource()

        with pytest.raises(ValueError, match="bound must be an integer"):
            rng.random_nonzero_below(bound)

    def test_entropy_failure_raises(self):
        """OS entropy failure surfaces as RandomnessError, not a fallback."""
        rng = security.RandomnessSource()
        rng._rng = _FailingSystemRandom()

        with pytest.raises(RandomnessError) as exc_info:
            rng.random_nonzero_below(100, "r generation")

        err = exc_info.value
        assert err.operation == "r generation"
        assert "r generation failed" in str(err)
        assert isinstance(err.__cause__, OSError)
        assert isinstance(err, CryptographicError)

    def test_fork_detection(self):
        """Test fork detection reinitializes RNG."""
        rng = security.RandomnessSource()
        original_pid = rng._pid
        stale = _FailingSystemRandom()
        rng._rng = stale

        # Simulate fork by changing PID
        rng._pid = original_pid + 1

        # Next call should detect fork and reinitialize
        value = rng.random_nonzero_below(1000)
        assert 0 < value < 999
        assert rng._pid == os.getpid()
        assert rng._rng is not stale


class TestHashToInteger:
    """Test hashing of secrets to integers."""

    def test_matches_sha256(self):
        """Digest is SHA-256 read big-endian, reduced mod q."""
        expected = int.from_bytes(hashlib.sha256(b"hello").digest(), "big")

        assert security.hash_to_integer(b"hello", DEFAULT_GROUP.q) == expected

    def test_reduction(self):
        """Result is reduced modulo the given modulus."""
        expected = int.from_bytes(hashlib.sha256(b"hello").digest(), "big") % 1019

        assert security.hash_to_integer(b"hello", 1019) == expected

    def test_deterministic(self):
        """Same input, same output."""
        a = security.hash_to_integer(b"secret", DEFAULT_GROUP.q)
        b = security.hash_to_integer(b"secret", DEFAULT_GROUP.q)
        assert a == b

    def test_distinct_inputs(self):
        """Different inputs produce different digests."""
        a = security.hash_to_integer(b"hello", DEFAULT_GROUP.q)
        b = security.hash_to_integer(b"hellp", DEFAULT_GROUP.q)
        assert a != b

    def test_empty_input_allowed(self):
        """Empty secrets are valid."""
        expected = int.from_bytes(hashlib.sha256(b"").digest(), "big")

        assert security.hash_to_integer(b"", DEFAULT_GROUP.q) == expected

    def test_bytes_like_inputs(self):
        """bytearray and memoryview hash like bytes."""
        expected = security.hash_to_integer(b"abc", DEFAULT_GROUP.q)

        assert security.hash_to_integer(bytearray(b"abc"), DEFAULT_GROUP.q) == expected
        assert security.hash_to_integer(memoryview(b"abc"), DEFAULT_GROUP.q) == expected

    def test_non_bytes_raises(self):
        """Text must be encoded by the caller."""
        with pytest.raises(TypeError, match="data must be bytes"):
            security.hash_to_integer("hello", DEFAULT_GROUP.q)

    def test_invalid_modulus_raises(self):
        """Modulus must exceed 1."""
        with pytest.raises(ValueError, match="modulus must be > 1"):
            security.hash_to_integer(b"hello", 1)


class TestEncodingHelpers:
    """Test integer encoding helpers."""

    def test_fixed_width(self):
        """Encoding pads to the requested width."""
        assert security.int_to_bytes(1, 4) == b"\x00\x00\x00\x01"

    def test_inverse(self):
        """int_from_bytes reverses int_to_bytes."""
        value = DEFAULT_GROUP.p - 1
        encoded = security.int_to_bytes(value, DEFAULT_GROUP.byte_length)

        assert len(encoded) == 512
        assert security.int_from_bytes(encoded) == value

    def test_negative_raises(self):
        """Negative integers have no encoding."""
        with pytest.raises(ValueError, match="non-negative"):
            security.int_to_bytes(-1, 4)

    def test_overflow_raises(self):
        """Values wider than the target width are rejected."""
        with pytest.raises(OverflowError):
            security.int_to_bytes(2**40, 4)


class TestConstantTimeCompare:
    """Test constant-time comparison."""

    def test_equal(self):
        """Equal byte strings compare equal."""
        assert security.constant_time_compare(b"abc", b"abc")

    def test_not_equal(self):
        """Different byte strings compare unequal."""
        assert not security.constant_time_compare(b"abc", b"abd")
        assert not security.constant_time_compare(b"abc", b"abcd")
