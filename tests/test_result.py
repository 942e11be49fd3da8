"""Tests for the Ok/Err outcome type."""

import pytest

from klaw_option import Err, Failure, FailureError, Nothing, Ok, Some, collect


class TestCreation:
    """Tests for Ok/Err instantiation."""

    def test_ok_holds_value(self):
        assert Ok(42).value == 42

    def test_err_holds_error(self):
        assert Err('boom').error == 'boom'

    def test_failure_constructor(self):
        """Err.failure() wraps message and code in a Failure."""
        err = Err.failure('missing', code=404)
        assert err == Err(Failure('missing', 404))
        assert err.error.message == 'missing'
        assert err.error.code == 404

    def test_failure_code_defaults_to_none(self):
        assert Err.failure('missing').error.code is None

    def test_ok_is_frozen(self):
        with pytest.raises(AttributeError):
            Ok(1).value = 2  # type: ignore[misc]

    def test_hashable(self):
        assert {Ok(1): 'a'}[Ok(1)] == 'a'
        assert hash(Err.failure('x')) == hash(Err.failure('x'))

    def test_ok_not_equal_to_err(self):
        assert Ok(1) != Err(1)


class TestQueryingAndUnwrap:
    """Tests for is_ok/is_err and the unwrap family."""

    def test_queries(self):
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False
        assert Err('e').is_ok() is False
        assert Err('e').is_err() is True

    def test_ok_unwrap(self):
        assert Ok(1).unwrap() == 1

    def test_ok_unwrap_err_raises(self):
        with pytest.raises(RuntimeError, match='Called unwrap_err on Ok'):
            Ok(1).unwrap_err()

    def test_err_unwrap_err(self):
        assert Err('e').unwrap_err() == 'e'

    def test_err_unwrap_failure_raises_failure_error(self):
        """Unwrapping a Failure raises its exception twin."""
        with pytest.raises(FailureError) as exc_info:
            Err.failure('missing', 404).unwrap()
        assert exc_info.value.message == 'missing'
        assert exc_info.value.code == 404

    def test_err_unwrap_other_raises_runtime_error(self):
        with pytest.raises(RuntimeError, match='Called unwrap on Err'):
            Err('e').unwrap()

    def test_unwrap_or(self):
        assert Ok(1).unwrap_or(0) == 1
        assert Err('e').unwrap_or(0) == 0

    def test_unwrap_or_else(self):
        assert Ok(1).unwrap_or_else(lambda: 0) == 1
        assert Err('e').unwrap_or_else(lambda: 0) == 0

    def test_expect(self):
        assert Ok(1).expect('fine') == 1
        with pytest.raises(RuntimeError, match='custom message'):
            Err('e').expect('custom message')


class TestTransform:
    """Tests for map, map_err, and_then and or_else."""

    def test_map(self):
        assert Ok(5).map(lambda x: x * 2) == Ok(10)
        assert Err('e').map(lambda x: x * 2) == Err('e')

    def test_map_err(self):
        assert Ok(1).map_err(str.upper) == Ok(1)
        assert Err('e').map_err(str.upper) == Err('E')

    def test_and_then(self):
        assert Ok(5).and_then(lambda x: Ok(x + 1)) == Ok(6)
        assert Ok(5).and_then(lambda _: Err('no')) == Err('no')
        assert Err('e').and_then(lambda x: Ok(x)) == Err('e')

    def test_or_else(self):
        assert Ok(1).or_else(lambda _: Ok(2)) == Ok(1)
        assert Err('e').or_else(lambda e: Ok(len(e))) == Ok(1)


class TestOptionConversion:
    """Tests for ok() and err() returning Options."""

    def test_ok_to_option(self):
        assert Ok(1).ok() == Some(1)
        assert Ok(1).err() == Nothing()

    def test_err_to_option(self):
        assert Err('e').ok() == Nothing()
        assert Err('e').err() == Some('e')

    def test_round_trip_through_option(self):
        assert Some(3).ok_or('missing').ok() == Some(3)
        assert Nothing().ok_or('missing').err() == Some(Failure('missing'))


class TestCollect:
    """Tests for collect()."""

    def test_all_ok(self):
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_first_err_wins(self):
        assert collect([Ok(1), Err('a'), Err('b')]) == Err('a')

    def test_empty(self):
        assert collect([]) == Ok([])
