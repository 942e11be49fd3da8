"""Tests for bail(), the context manager protocol and the @result decorator."""

import pytest

from klaw_option import Err, Nothing, Ok, Option, Propagate, Some, result


class TestBail:
    """Tests for bail() and unwrap_or_return()."""

    def test_some_bail(self):
        assert Some(42).bail() == 42

    def test_nothing_bail_raises_propagate(self):
        nothing = Nothing()
        with pytest.raises(Propagate) as exc_info:
            nothing.bail()
        assert exc_info.value.value is nothing

    def test_unwrap_or_return_alias(self):
        assert Some(42).unwrap_or_return() == 42
        with pytest.raises(Propagate):
            Nothing().unwrap_or_return()

    def test_err_bail(self):
        err = Err('boom')
        with pytest.raises(Propagate) as exc_info:
            err.bail()
        assert exc_info.value.value is err

    def test_ok_bail(self):
        assert Ok(1).bail() == 1


class TestContextManager:
    """Tests for `with option as value`."""

    def test_some_yields_value(self):
        with Some(42) as value:
            assert value == 42

    def test_nothing_raises_propagate(self):
        nothing = Nothing()
        with pytest.raises(Propagate) as exc_info, nothing as _value:
            pytest.fail('body must not run')
        assert exc_info.value.value is nothing


class TestResultDecorator:
    """Tests for @result on sync and async functions."""

    def test_sync_returns_nothing_early(self):
        steps: list[str] = []

        @result
        def first_char(name: Option[str]) -> Option[str]:
            value = name.bail()
            steps.append('after bail')
            return Option.from_(value[:1] or None)

        assert first_char(Some('klaw')) == Some('k')
        assert first_char(Nothing()).is_none()
        assert steps == ['after bail']

    def test_sync_returns_err_early(self):
        @result
        def double(value: Ok[int] | Err[str]) -> Ok[int] | Err[str]:
            return Ok(value.bail() * 2)

        assert double(Ok(2)) == Ok(4)
        assert double(Err('bad')) == Err('bad')

    def test_other_exceptions_propagate(self):
        @result
        def broken() -> Option[int]:
            raise ValueError('nope')

        with pytest.raises(ValueError, match='nope'):
            broken()

    def test_preserves_metadata(self):
        @result
        def documented() -> Option[int]:
            """Docstring survives wrapping."""
            return Some(1)

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Docstring survives wrapping.'

    async def test_async_returns_nothing_early(self):
        @result
        async def lookup(key: Option[str]) -> Option[int]:
            return Some(len(key.bail()))

        assert await lookup(Some('abc')) == Some(3)
        assert (await lookup(Nothing())).is_none()

    def test_context_manager_inside_decorator(self):
        @result
        def increment(option: Option[int]) -> Option[int]:
            with option as value:
                return Some(value + 1)

        assert increment(Some(1)) == Some(2)
        assert increment(Nothing()) == Nothing()
