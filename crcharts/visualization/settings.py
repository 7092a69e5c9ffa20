"""
Layout parameters and configurable chart defaults.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, asdict, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from crcharts.exceptions import ConfigError
from crcharts.utils.config_loader import ConfigLoader


@dataclass(frozen=True)
class Margin:
    """Pixel margins around a plot area."""
    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0


@dataclass(frozen=True)
class Settings:
    """
    Layout parameters of one chart instance.

    Starts with the measured width and resolved height; each drawing
    stage overlays its own keys with ``merge`` and passes the result on.
    """
    width: float
    height: float

    # Column charts
    margin: Optional[Margin] = None
    tick_padding: Optional[float] = None
    outer_column_padding: Optional[float] = None
    column_padding: Optional[float] = None
    display_width: Optional[float] = None
    display_height: Optional[float] = None

    # Pie charts
    legend_width: Optional[float] = None
    radius: Optional[float] = None

    def merge(self, **overrides: Any) -> 'Settings':
        """Return a copy with ``overrides`` laid over the existing keys."""
        return replace(self, **overrides)

    def to_dict(self) -> Dict:
        """Convert to dictionary, leaving out keys no stage has set."""
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass
class ChartDefaults:
    """
    Defaults applied when a chart configuration leaves a field out.
    """
    value_format: str = "number"
    palette: str = "Set2"
    min_height: float = 180

    # Column and histogram layout
    column_margin: Margin = field(default_factory=lambda: Margin(top=20, right=0, bottom=30, left=30))
    tick_padding: float = 5
    outer_column_padding: float = .25
    column_padding: float = .2
    histogram_padding: float = .025
    label_offset: float = 8  # value labels sit this far above the bar

    # Pie layout
    legend_row_height: float = 18
    legend_top: float = 30
    swatch_size: float = 10
    ring_inset: float = 40
    inner_radius_ratio: float = 2.5

    @classmethod
    def from_dict(cls, config: Optional[Dict[str, Any]]) -> 'ChartDefaults':
        """
        Build defaults from a mapping, e.g. a YAML ``defaults`` section.

        Raises
        ------
        ConfigError
            If the section is not a mapping or names unknown settings
        """
        if config is None:
            config = {}
        if not isinstance(config, Mapping):
            raise ConfigError(f"Chart defaults must be a mapping, got {type(config).__name__}")
        config = dict(config)
        _check_keys('defaults', config, cls)

        margin = config.pop('column_margin', None)
        defaults = cls(**config)
        if isinstance(margin, Margin):
            defaults.column_margin = margin
        elif margin is not None:
            if not isinstance(margin, Mapping):
                raise ConfigError(f"column_margin must be a mapping, got {type(margin).__name__}")
            _check_keys('column_margin', margin, Margin)
            defaults.column_margin = Margin(**margin)
        return defaults

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path], section: str = 'defaults') -> 'ChartDefaults':
        return cls.from_dict(ConfigLoader(config_path).get(section, {}))

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return asdict(self)


def _check_keys(section: str, config: Mapping, cls) -> None:
    unknown = sorted(str(k) for k in set(config) - {f.name for f in fields(cls)})
    if unknown:
        raise ConfigError(f"Unknown {section} setting(s): {', '.join(unknown)}")
