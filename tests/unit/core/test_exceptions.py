"""Unit tests for the relayhints exception hierarchy."""

import pytest

from relayhints.core.exceptions import ConfigurationError, RelayHintsError


class TestExceptionHierarchy:
    """Verify issubclass relationships match the documented tree."""

    def test_configuration_error_is_relay_hints_error(self) -> None:
        assert issubclass(ConfigurationError, RelayHintsError)

    def test_base_is_exception(self) -> None:
        assert issubclass(RelayHintsError, Exception)

    def test_caught_by_base(self) -> None:
        with pytest.raises(RelayHintsError, match="bad weight"):
            raise ConfigurationError("bad weight")

    def test_chained_cause_preserved(self) -> None:
        cause = ValueError("inner")
        try:
            raise ConfigurationError("outer") from cause
        except ConfigurationError as e:
            assert e.__cause__ is cause
