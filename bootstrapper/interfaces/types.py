# bootstrapper/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, Any, Callable, Dict

if TYPE_CHECKING:
    from bootstrapper.configuration.reflection import PropertyDescriptor

SectionName = str
ConfigurationMap = Dict[str, str]

# Conversion Types
ConversionCallback = Callable[[str, "PropertyDescriptor"], Any]
ConversionCallbackMap = Dict[str, ConversionCallback]
