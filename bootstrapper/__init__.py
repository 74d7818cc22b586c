"""bootstrapper: extension configuration binding for application startup

This package provides the configuration section behavior of an application
bootstrapper. The behavior walks the extensions composed by the host, loads
the configuration section that belongs to each one and assigns matching
entries onto the extension's properties.

Responsibilities:
    - Configuration section lookup per extension
    - Filling the extension's configuration map
    - Binding configuration entries onto extension properties
    - Pluggable value conversion

Interactions:
    - Host bootstrapper calls the behavior as one startup step
    - Extensions opt into custom collaborators through protocols
    - Logging system for diagnostics

Cross-cutting Concerns:
    Error Handling:
        - Structured error hierarchy rooted at BootstrapperError
        - Fail-fast, no rollback of already bound extensions

    Logging:
        - Standard library logging, one logger per module
"""

__version__ = "0.1.0"
