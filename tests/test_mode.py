"""Tests for pkginit.scaffold.mode module."""

from __future__ import annotations

import pytest

from pkginit.errors import InvalidModeError, PackageInitError
from pkginit.scaffold.mode import InitMode, format_mode, parse_mode


class TestParseMode:
    """Tests for parse_mode function."""

    @pytest.mark.parametrize("raw", ["library", "Library", "LIBRARY"])
    def test_case_insensitive(self, raw: str) -> None:
        """Should ignore case."""
        assert parse_mode(raw) is InitMode.LIBRARY

    def test_executable(self) -> None:
        assert parse_mode("executable") is InitMode.EXECUTABLE

    def test_system_module(self) -> None:
        assert parse_mode("System-Module") is InitMode.SYSTEM_MODULE

    @pytest.mark.parametrize("raw", ["system_module", "systemModule", "lib", ""])
    def test_rejects_unknown(self, raw: str) -> None:
        """Should raise InvalidModeError carrying the raw string."""
        with pytest.raises(InvalidModeError) as exc_info:
            parse_mode(raw)

        assert exc_info.value.raw == raw
        assert str(exc_info.value) == f"invalid initialization type: {raw}"

    def test_error_is_package_init_error(self) -> None:
        with pytest.raises(PackageInitError):
            parse_mode("bogus")


class TestFormatMode:
    """Tests for format_mode function."""

    def test_canonical_strings(self) -> None:
        assert format_mode(InitMode.LIBRARY) == "library"
        assert format_mode(InitMode.EXECUTABLE) == "executable"
        assert format_mode(InitMode.SYSTEM_MODULE) == "system-module"

    @pytest.mark.parametrize("mode", list(InitMode))
    def test_parse_accepts_formatted(self, mode: InitMode) -> None:
        """Should parse back the canonical spelling."""
        assert parse_mode(format_mode(mode)) is mode

    def test_exactly_three_modes(self) -> None:
        assert len(InitMode) == 3
