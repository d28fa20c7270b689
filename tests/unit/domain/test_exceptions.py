"""Tests for domain/exceptions.py."""

import pytest

from tagfilter.domain.exceptions import (
    InvalidPatternError,
    TagFilterError,
    UnknownOperatorError,
    UnsupportedMatcherError,
)
from tagfilter.domain.model.enums import Matcher


class TestUnsupportedMatcherError:
    """Tests for UnsupportedMatcherError exception."""

    def test_is_tagfilter_error(self) -> None:
        assert issubclass(UnsupportedMatcherError, TagFilterError)

    def test_is_not_implemented_error(self) -> None:
        assert issubclass(UnsupportedMatcherError, NotImplementedError)

    def test_has_matcher_attribute(self) -> None:
        err = UnsupportedMatcherError(Matcher.SIGNAL)
        assert err.matcher is Matcher.SIGNAL

    def test_message_format(self) -> None:
        err = UnsupportedMatcherError(Matcher.PATH)
        assert str(err) == "no subject projection for matcher 'path'"

    def test_can_catch_as_tagfilter_error(self) -> None:
        with pytest.raises(TagFilterError) as exc_info:
            raise UnsupportedMatcherError(Matcher.PROCESS_COMPLETION)
        assert isinstance(exc_info.value, UnsupportedMatcherError)


class TestInvalidPatternError:
    """Tests for InvalidPatternError exception."""

    def test_attributes(self) -> None:
        err = InvalidPatternError(source="(", reason="missing )")
        assert err.source == "("
        assert err.reason == "missing )"

    def test_message_format(self) -> None:
        err = InvalidPatternError(source="(", reason="missing )")
        assert str(err) == "invalid pattern '(': missing )"

    def test_is_value_error(self) -> None:
        assert issubclass(InvalidPatternError, ValueError)


class TestUnknownOperatorError:
    """Tests for UnknownOperatorError exception."""

    def test_message_format(self) -> None:
        assert str(UnknownOperatorError("<>")) == "unknown operator symbol '<>'"

    def test_is_value_error(self) -> None:
        assert issubclass(UnknownOperatorError, ValueError)
