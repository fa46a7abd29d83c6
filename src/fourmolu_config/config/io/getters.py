# topmark:header:start
#
#   project      : fourmolu-config
#   file         : getters.py
#   file_relpath : src/fourmolu_config/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 The fourmolu-config authors
#
# topmark:header:end

"""Checked value getters for decoded configuration mappings.

These helpers extract one value from a mapping produced by the YAML decoder
(or from a caller-supplied arguments mapping) and validate its shape.

Behavior shared by every getter:
    - Missing key / ``None`` value -> ``None`` (the option is *absent*).
    - Wrong type or invalid value ->
      [`ConfigFileError`][fourmolu_config.config.errors.ConfigFileError].

Nothing is coerced and nothing is dropped: a malformed value makes the whole
document invalid.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar

from fourmolu_config.config.errors import ConfigFileError
from fourmolu_config.config.logging import get_logger

from .guards import is_any_list, is_str_list

if TYPE_CHECKING:
    from fourmolu_config.config.logging import FourmoluLogger

    from .types import YamlMapping

logger: FourmoluLogger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


def _location(where: str, key: str) -> str:
    return f"{where}.{key}" if where else key


def _reject(loc: str, expected: str, value: object) -> ConfigFileError:
    message: str = f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}"
    logger.debug(message)
    return ConfigFileError(message)


def get_bool_value_or_none_checked(
    table: YamlMapping,
    key: str,
    *,
    where: str = "",
) -> bool | None:
    """Return an optional boolean value.

    Integers are **not** coerced to booleans.

    Args:
        table (YamlMapping): Mapping to query.
        key (str): Key to extract.
        where (str): Location prefix used in error messages (e.g. ``"args"``).

    Returns:
        bool | None: The boolean value, or ``None`` when absent.

    Raises:
        ConfigFileError: When the value is present but not a ``bool``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise _reject(_location(where, key), "bool", value)


def get_int_value_or_none_checked(
    table: YamlMapping,
    key: str,
    *,
    where: str = "",
    minimum: int | None = None,
) -> int | None:
    """Return an optional int value.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
        - Floats are rejected, even integral ones such as ``4.0``.

    Args:
        table (YamlMapping): Mapping to query.
        key (str): Key to extract.
        where (str): Location prefix used in error messages.
        minimum (int | None): Smallest accepted value, if bounded.

    Returns:
        int | None: The int value, or ``None`` when absent.

    Raises:
        ConfigFileError: When the value is present but not an ``int``, or below ``minimum``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = _location(where, key)

    # Note: bool is a subclass of int; exclude it.
    if isinstance(value, bool) or not isinstance(value, int):
        raise _reject(loc, "int", value)

    if minimum is not None and value < minimum:
        message: str = f"Expected int >= {minimum} in {loc}, got {value}"
        logger.debug(message)
        raise ConfigFileError(message)
    return value


def get_enum_value_or_none_checked(
    table: YamlMapping,
    key: str,
    enum_cls: type[E],
    *,
    where: str = "",
) -> E | None:
    """Parse an optional enum value.

    Expected input is a `str` matching one of the Enum values (the YAML tags),
    or an existing member of ``enum_cls`` (API callers).

    Args:
        table (YamlMapping): Mapping to query.
        key (str): Key to extract.
        enum_cls (type[E]): Enum class whose values are the accepted tags.
        where (str): Location prefix used in error messages.

    Returns:
        E | None: The matching member, or ``None`` when absent.

    Raises:
        ConfigFileError: When the value is not a string or not one of the tags.
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None
    if isinstance(raw, enum_cls):
        return raw

    loc: Final[str] = _location(where, key)
    if not isinstance(raw, str):
        raise _reject(loc, "string enum value", raw)

    try:
        return enum_cls(raw)
    except ValueError:
        allowed: str = ", ".join(str(e.value) for e in enum_cls)
        message: str = f"Invalid value for {loc}: {raw!r} (allowed: {allowed})"
        logger.debug(message)
        raise ConfigFileError(message) from None


def get_string_list_value_checked(
    table: YamlMapping,
    key: str,
    *,
    where: str = "",
) -> list[str]:
    """Extract a list of strings.

    Behavior:
        - If the key is missing or null, returns [].
        - A non-list value, or a list holding a non-string item, is an error.

    Args:
        table (YamlMapping): Mapping to query.
        key (str): Key to extract.
        where (str): Location prefix used in error messages.

    Returns:
        list[str]: The string entries, in document order.

    Raises:
        ConfigFileError: When the value or one of its items has the wrong type.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []

    loc: Final[str] = _location(where, key)

    if is_str_list(value):
        return list(value)
    if not is_any_list(value):
        raise _reject(loc, "list", value)

    index, item = next((i, x) for i, x in enumerate(value) if not isinstance(x, str))
    raise _reject(f"{loc}[{index}]", "string", item)
