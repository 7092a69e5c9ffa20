"""
Colour palettes.

Colorbrewer color specifications and designs by Cynthia Brewer
(http://colorbrewer.org/). Qualitative schemes are flat lists;
sequential and diverging schemes are keyed by number of classes.
"""

from typing import Dict, List, Optional, Sequence, Union

import seaborn as sns
from matplotlib.colors import is_color_like, to_hex

from crcharts.exceptions import PaletteError
from crcharts.utils.logger import LoggerMixin

DEFAULT_PALETTE = 'Set2'

COLORBREWER: Dict[str, Union[List[str], Dict[int, List[str]]]] = {
    'Greens': {
        2: ["#e5f5e0", "#a1d99b"],
        3: ["#e5f5e0", "#a1d99b", "#31a354"],
        4: ["#edf8e9", "#bae4b3", "#74c476", "#238b45"],
        5: ["#edf8e9", "#bae4b3", "#74c476", "#31a354", "#006d2c"],
        6: ["#edf8e9", "#c7e9c0", "#a1d99b", "#74c476", "#31a354", "#006d2c"],
        7: ["#edf8e9", "#c7e9c0", "#a1d99b", "#74c476", "#41ab5d", "#238b45", "#005a32"],
        8: ["#f7fcf5", "#e5f5e0", "#c7e9c0", "#a1d99b", "#74c476", "#41ab5d", "#238b45", "#005a32"],
        9: ["#f7fcf5", "#e5f5e0", "#c7e9c0", "#a1d99b", "#74c476", "#41ab5d", "#238b45", "#006d2c", "#00441b"],
    },
    'RdBu': {
        2: ["#f7f7f7", "#67a9cf"],
        3: ["#ef8a62", "#f7f7f7", "#67a9cf"],
        4: ["#ca0020", "#f4a582", "#92c5de", "#0571b0"],
        5: ["#ca0020", "#f4a582", "#f7f7f7", "#92c5de", "#0571b0"],
        6: ["#b2182b", "#ef8a62", "#fddbc7", "#d1e5f0", "#67a9cf", "#2166ac"],
        7: ["#b2182b", "#ef8a62", "#fddbc7", "#f7f7f7", "#d1e5f0", "#67a9cf", "#2166ac"],
        8: ["#b2182b", "#d6604d", "#f4a582", "#fddbc7", "#d1e5f0", "#92c5de", "#4393c3", "#2166ac"],
        9: ["#b2182b", "#d6604d", "#f4a582", "#fddbc7", "#f7f7f7", "#d1e5f0", "#92c5de", "#4393c3", "#2166ac"],
        10: ["#67001f", "#b2182b", "#d6604d", "#f4a582", "#fddbc7", "#d1e5f0", "#92c5de", "#4393c3", "#2166ac", "#053061"],
        11: ["#67001f", "#b2182b", "#d6604d", "#f4a582", "#fddbc7", "#f7f7f7", "#d1e5f0", "#92c5de", "#4393c3", "#2166ac", "#053061"],
    },
    'Set1': ['#e41a1c', '#377eb8', '#4daf4a', '#984ea3', '#ff7f00', '#ffff33', '#a65628', '#f781bf', '#999999'],
    'Set2': ['#66c2a5', '#fc8d62', '#8da0cb', '#e78ac3', '#a6d854', '#ffd92f', '#e5c494', '#b3b3b3'],
    'Set3': ['#8dd3c7', '#ffffb3', '#bebada', '#fb8072', '#80b1d3', '#fdb462', '#b3de69', '#fccde5', '#d9d9d9', '#bc80bd', '#ccebc5', '#ffed6f'],
    'Accent': ['#7fc97f', '#beaed4', '#fdc086', '#ffff99', '#386cb0', '#f0027f', '#bf5b17', '#666666'],
}


class PaletteRegistry(LoggerMixin):
    """
    Lookup table from palette name to colours.

    Names missing from the table are resolved through seaborn, which
    knows the matplotlib colormaps and its own named palettes.
    """

    def __init__(self, palettes: Optional[Dict] = None):
        self._palettes = dict(COLORBREWER if palettes is None else palettes)

    def register(self, name: str, colors: Sequence[str]) -> List[str]:
        """
        Add or replace a flat palette.

        Parameters
        ----------
        name : str
            Palette name
        colors : sequence
            Any matplotlib colour specs (``'red'``, ``'#abc'``, RGB tuples)

        Returns
        -------
        list of str
            The stored colours as hex strings

        Raises
        ------
        PaletteError
            If the palette is empty or an entry is not a colour
        """
        colors = list(colors)
        if not colors:
            raise PaletteError(f"Palette '{name}' has no colours")

        invalid = [c for c in colors if not is_color_like(c)]
        if invalid:
            raise PaletteError(f"Palette '{name}' has invalid colours: {invalid}")

        self._palettes[name] = [to_hex(c) for c in colors]
        self.logger.debug(f"Registered palette '{name}' with {len(colors)} colours")
        return list(self._palettes[name])

    def get(self, name: Optional[str] = None, size: Optional[int] = None) -> List[str]:
        """
        Colours of a palette.

        Parameters
        ----------
        name : str, optional
            Palette name (default Set2)
        size : int, optional
            Number of categories to colour; picks the class count of a
            sized scheme (the largest when omitted)

        Returns
        -------
        list of str
            Hex colours
        """
        name = name or DEFAULT_PALETTE
        palette = self._palettes.get(name)

        if palette is None:
            palette = self._from_seaborn(name)

        if isinstance(palette, dict):
            classes = sorted(palette)
            if size is None or size >= classes[-1]:
                count = classes[-1]
            else:
                count = max(classes[0], min(size, classes[-1]))
            palette = palette[count]

        return list(palette)

    def _from_seaborn(self, name: str) -> List[str]:
        try:
            colors = sns.color_palette(name).as_hex()
        except ValueError:
            self.logger.warning(f"Palette '{name}' not found, using {DEFAULT_PALETTE}")
            return self._palettes[DEFAULT_PALETTE]
        self.logger.debug(f"Resolved palette '{name}' through seaborn")
        return list(colors)


palettes = PaletteRegistry()


def get_palette(name: Optional[str] = None, size: Optional[int] = None) -> List[str]:
    """Colours of a named palette from the shared registry."""
    return palettes.get(name, size)


def register_palette(name: str, colors: Sequence[str]) -> List[str]:
    """Add a palette to the shared registry."""
    return palettes.register(name, colors)
