"""
Exceptions raised by the chart builders.
"""


class ChartError(Exception):
    """Base class for chart errors."""


class ContainerNotFoundError(ChartError):
    """The chart container could not be resolved to an element."""

    def __init__(self, container_id: str):
        self.container_id = container_id
        super().__init__(f"Chart container not found: #{container_id}")


class UnsupportedChartKindError(ChartError):
    """Raised in strict mode when the chart kind has no builder."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unsupported chart kind: {kind!r}")


class PaletteError(ChartError):
    """A custom palette contains something that is not a colour."""


class ConfigError(ChartError):
    """A chart definition or defaults file cannot be used."""
