"""
Exceptions raised by AirBudd.

Only programming and configuration mistakes raise. Missing labels, hints,
errors or bound objects are ordinary cases with defaults.
"""


class UnsupportedFieldKind(ValueError):
    """Raised when a field kind or button purpose is outside the supported set."""

    def __init__(self, kind: str, supported: list[str]):
        self.kind = kind
        self.supported = supported
        super().__init__(
            f"Unsupported field kind or purpose '{kind}'. "
            f"Supported: {', '.join(supported)}"
        )


class ConfigurationError(ValueError):
    """Raised when form defaults are given an unknown setting."""
