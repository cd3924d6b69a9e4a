"""Tests for toolpath.resolver."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from toolpath.errors import ExecutableNotFoundError, OverrideInvalidError, ResolutionError  # noqa: E402
from toolpath.resolver import Attempt, Resolver, fallback_path, override_var_name  # noqa: E402

HOME = Path("/home/dev")


class FakeLauncher:
    """Launcher that only starts candidates in ``runnable`` and records every call."""

    def __init__(self, runnable: set[str] | None = None, error: type[Exception] = FileNotFoundError) -> None:
        self.runnable = runnable or set()
        self.error = error
        self.calls: list[list[str]] = []

    def launch(self, argv: Sequence[str]) -> None:
        self.calls.append(list(argv))
        if argv[0] not in self.runnable:
            raise self.error(2, "No such file or directory", argv[0])

    @property
    def candidates(self) -> list[str]:
        return [call[0] for call in self.calls]


def _resolver(launcher: FakeLauncher, environ: dict[str, str] | None = None, home: Path | None = HOME) -> Resolver:
    return Resolver(launcher=launcher, environ=environ or {}, home=lambda: home)


def _cargo_fallback(name: str = "cargo") -> str:
    return str(HOME / ".cargo" / "bin" / name)


# ==============================================================================
# override_var_name
# ==============================================================================


class TestOverrideVarName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("cargo", "CARGO"),
            ("rustc", "RUSTC"),
            ("rust-analyzer", "RUST-ANALYZER"),
            ("cargo.exe", "CARGO.EXE"),
            ("MiXeD_2", "MIXED_2"),
        ],
    )
    def test_uppercases_without_other_changes(self, name: str, expected: str) -> None:
        assert override_var_name(name) == expected

    def test_idempotent(self) -> None:
        once = override_var_name("rust-gdb")
        assert override_var_name(once) == once

    def test_leaves_non_ascii_alone(self) -> None:
        assert override_var_name("straße") == "STRAßE"


def test_fallback_path_is_under_cargo_bin() -> None:
    assert fallback_path("rustc", HOME) == HOME / ".cargo" / "bin" / "rustc"


# ==============================================================================
# Override variable
# ==============================================================================


class TestOverride:
    def test_valid_override_returned_verbatim(self) -> None:
        launcher = FakeLauncher({"./tools//cargo", "cargo", _cargo_fallback()})
        resolver = _resolver(launcher, {"CARGO": "./tools//cargo"})

        assert resolver.resolve("cargo") == "./tools//cargo"
        assert launcher.calls == [["./tools//cargo", "--version"]]

    def test_override_may_be_bare_name(self) -> None:
        launcher = FakeLauncher({"cargo-nightly"})
        resolver = _resolver(launcher, {"CARGO": "cargo-nightly"})

        assert resolver.resolve("cargo") == "cargo-nightly"

    def test_invalid_override_does_not_fall_through(self) -> None:
        launcher = FakeLauncher({"cargo", _cargo_fallback()})
        resolver = _resolver(launcher, {"CARGO": "/bad/path"})

        with pytest.raises(OverrideInvalidError) as exc_info:
            resolver.resolve("cargo")

        assert "CARGO" in str(exc_info.value)
        assert "/bad/path" in str(exc_info.value)
        assert exc_info.value.env_var == "CARGO"
        assert exc_info.value.value == "/bad/path"
        assert launcher.candidates == ["/bad/path"]

    def test_empty_override_counts_as_set(self) -> None:
        launcher = FakeLauncher({"cargo"})
        resolver = _resolver(launcher, {"CARGO": ""})

        with pytest.raises(OverrideInvalidError):
            resolver.resolve("cargo")
        assert launcher.candidates == [""]

    def test_permission_error_is_invalid(self) -> None:
        launcher = FakeLauncher(error=PermissionError)
        resolver = _resolver(launcher, {"RUSTC": "/opt/rustc"})

        with pytest.raises(OverrideInvalidError, match="RUSTC"):
            resolver.resolve("rustc")

    def test_lowercase_variable_is_not_an_override(self) -> None:
        launcher = FakeLauncher({"cargo"})
        resolver = _resolver(launcher, {"cargo": "/bad/path"})

        assert resolver.resolve("cargo") == "cargo"


# ==============================================================================
# Search path and fallback
# ==============================================================================


class TestSearch:
    def test_bare_name_returned_unchanged(self) -> None:
        launcher = FakeLauncher({"cargo", _cargo_fallback()})
        resolver = _resolver(launcher)

        assert resolver.resolve("cargo") == "cargo"
        assert launcher.candidates == ["cargo"]

    def test_fallback_used_when_not_on_path(self) -> None:
        launcher = FakeLauncher({_cargo_fallback("rustc")})
        resolver = _resolver(launcher)

        assert resolver.resolve("rustc") == _cargo_fallback("rustc")
        assert launcher.candidates == ["rustc", _cargo_fallback("rustc")]

    def test_not_found_names_executable_and_variable(self) -> None:
        launcher = FakeLauncher()
        resolver = _resolver(launcher)

        with pytest.raises(ExecutableNotFoundError) as exc_info:
            resolver.resolve("rustup")

        message = str(exc_info.value)
        assert "`rustup`" in message
        assert "$RUSTUP" in message
        assert "$PATH" in message
        assert exc_info.value.executable_name == "rustup"
        assert launcher.candidates == ["rustup", _cargo_fallback("rustup")]

    def test_unknown_home_skips_fallback(self) -> None:
        launcher = FakeLauncher()
        resolver = _resolver(launcher, home=None)

        with pytest.raises(ExecutableNotFoundError):
            resolver.resolve("cargo")
        assert launcher.candidates == ["cargo"]

    def test_value_error_from_launch_is_invalid(self) -> None:
        launcher = FakeLauncher(error=ValueError)
        resolver = _resolver(launcher)

        with pytest.raises(ExecutableNotFoundError):
            resolver.resolve("cargo")

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(ResolutionError):
            _resolver(FakeLauncher()).resolve("cargo")

    def test_accepts_path_like_name(self) -> None:
        launcher = FakeLauncher({"cargo"})
        assert _resolver(launcher).resolve(Path("cargo")) == "cargo"


# ==============================================================================
# Trace and defaults
# ==============================================================================


class TestTrace:
    def test_records_each_attempt_in_order(self) -> None:
        launcher = FakeLauncher({_cargo_fallback()})
        trace: list[Attempt] = []

        _resolver(launcher).resolve("cargo", trace=trace)

        assert trace == [
            Attempt("path", "cargo", False),
            Attempt("fallback", _cargo_fallback(), True),
        ]

    def test_override_failure_records_single_attempt(self) -> None:
        trace: list[Attempt] = []
        with pytest.raises(OverrideInvalidError):
            _resolver(FakeLauncher(), {"CARGO": "/bad"}).resolve("cargo", trace=trace)
        assert [a.to_dict() for a in trace] == [{"source": "override", "candidate": "/bad", "valid": False}]


def test_default_environ_is_read_at_call_time(monkeypatch) -> None:
    launcher = FakeLauncher({"/opt/cargo"})
    resolver = Resolver(launcher=launcher, home=lambda: HOME)

    monkeypatch.setenv("CARGO", "/opt/cargo")
    assert resolver.resolve("cargo") == "/opt/cargo"

    monkeypatch.delenv("CARGO")
    with pytest.raises(ExecutableNotFoundError):
        resolver.resolve("cargo")


def test_default_home_unknown_skips_fallback(monkeypatch) -> None:
    def no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", staticmethod(no_home))
    launcher = FakeLauncher()
    resolver = Resolver(launcher=launcher, environ={})

    with pytest.raises(ExecutableNotFoundError):
        resolver.resolve("cargo")
    assert launcher.candidates == ["cargo"]
