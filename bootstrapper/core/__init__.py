# bootstrapper/core/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from bootstrapper.core.behavior import Behavior
from bootstrapper.core.errors import AmbiguousPropertyMatchError, ArgumentNullError, BootstrapperError
from bootstrapper.core.extension import ExtensionBase

__all__ = [
    "AmbiguousPropertyMatchError",
    "ArgumentNullError",
    "Behavior",
    "BootstrapperError",
    "ExtensionBase",
]
