# bootstrapper/core/behavior.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Behavior(ABC, Generic[T]):
    """
    One discrete step applied to the extensions during bootstrapping. The host
    decides which behaviors run and in which order.
    """

    @abstractmethod
    def behave(self, extensions: Iterable[T]) -> None:
        """
        Apply the behavior to the extensions.

        :param extensions: The extensions, in the order they must be processed.
        """
        raise NotImplementedError()
