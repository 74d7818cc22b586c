# bootstrapper/core/extension.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details


class ExtensionBase:
    """
    Convenience base for extensions. Extensions do not have to derive from it;
    any object satisfying the Extension protocol is accepted by the behaviors.
    """

    @property
    def name(self) -> str:
        """The extension name, the class name unless overridden."""
        return type(self).__name__

    def describe(self) -> str:
        return self.name
