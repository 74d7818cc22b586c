# bootstrapper/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Sequence


class BootstrapperError(Exception):
    """
    Base exception class for errors raised by the bootstrapper behaviors.
    """


class ArgumentNullError(BootstrapperError, ValueError):
    """
    Raised when a required argument is missing (None).
    """

    def __init__(self, parameter: str) -> None:
        super().__init__(f"Value cannot be None. Parameter name: {parameter}")
        self.parameter = parameter


class AmbiguousPropertyMatchError(BootstrapperError):
    """
    Raised when more than one property of an extension matches a configuration
    key under case-insensitive comparison.
    """

    def __init__(self, key: str, extension: Any, candidates: Sequence[str]) -> None:
        super().__init__(
            f"Configuration key '{key}' matches more than one property of "
            f"{type(extension).__name__}: {', '.join(candidates)}."
        )
        self.key = key
        self.extension = extension
        self.candidates = tuple(candidates)


def ensure_argument_not_null(value: Any, parameter: str) -> None:
    """
    Raise ArgumentNullError if value is None.

    :param value: The argument value.
    :param parameter: The argument name reported in the error.
    """
    if value is None:
        raise ArgumentNullError(parameter)
