# topmark:header:start
#
#   project      : fourmolu-config
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Pytest configuration for the fourmolu-config test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Discovery always ends with the user configuration directory. Every test runs
    with ``XDG_CONFIG_HOME`` pointing into its own temporary directory so that a
    developer's ``~/.config/fourmolu.yaml`` never leaks into results.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from hypothesis import settings

from fourmolu_config.config import logging
from fourmolu_config.constants import (
    APPDATA_ENV_VAR,
    CONFIG_FILE_NAME,
    LOG_LEVEL_ENV_VAR,
    XDG_CONFIG_HOME_ENV_VAR,
)

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

# Selected with `pytest --hypothesis-profile=thorough` (see the `property_test` nox session)
settings.register_profile("thorough", max_examples=2000, deadline=None)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.hypothesis_slow`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_fourmolu_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    FOURMOLU_LOG_LEVEL in their shell. Individual tests can still raise the level
    via `pytest_configure` or `caplog`.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def isolated_user_config(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Path:
    """Point the user configuration directory at an empty temporary directory.

    Args:
        tmp_path_factory (pytest.TempPathFactory): Factory for the temporary directory.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the environment.

    Returns:
        Path: The (existing, empty) directory used as ``$XDG_CONFIG_HOME``.
    """
    xdg: Path = tmp_path_factory.mktemp("xdg-config").resolve()
    monkeypatch.setenv(XDG_CONFIG_HOME_ENV_VAR, str(xdg))
    monkeypatch.delenv(APPDATA_ENV_VAR, raising=False)
    return xdg


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object. This object
            is used internally by pytest and typically holds command line options
            and configuration data.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_config(directory: Path, text: str) -> Path:
    """Write ``text`` as ``fourmolu.yaml`` inside ``directory`` (created if needed).

    Args:
        directory (Path): Directory that receives the config file.
        text (str): YAML document text.

    Returns:
        Path: The written config file.
    """
    directory.mkdir(parents=True, exist_ok=True)
    path: Path = directory / CONFIG_FILE_NAME
    path.write_text(text, encoding="utf-8")
    return path
