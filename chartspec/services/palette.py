from __future__ import annotations

from typing import Dict, List, Sequence

PALETTES: Dict[str, List[str]] = {
    "default": [
        "#3366CC",
        "#DC3912",
        "#FF9900",
        "#109618",
        "#990099",
        "#3B3EAC",
        "#0099C6",
        "#DD4477",
        "#66AA00",
        "#B82E2E",
        "#316395",
        "#994499",
        "#22AA99",
        "#AAAA11",
        "#6633CC",
        "#E67300",
        "#8B0707",
        "#329262",
        "#5574A6",
        "#3B3EAC",
    ],
    "ColorBlindSafe": [
        "#0072B2",
        "#E69F00",
        "#009E73",
        "#CC79A7",
        "#56B4E9",
        "#D55E00",
        "#F0E442",
        "#000000",
    ],
    "tab10": [
        "#1f77b4",
        "#ff7f0e",
        "#2ca02c",
        "#d62728",
        "#9467bd",
        "#8c564b",
        "#e377c2",
        "#7f7f7f",
        "#bcbd22",
        "#17becf",
    ],
}


def get_palette(name: str) -> List[str]:
    try:
        return list(PALETTES[name])
    except KeyError as exc:
        raise ValueError(f"palette must be one of {sorted(PALETTES)}") from exc


class ColorAssigner:
    """Cyclic index -> color lookup over a fixed palette."""

    def __init__(self, palette: Sequence[str] | None = None) -> None:
        colors = list(palette if palette is not None else PALETTES["default"])
        if not colors:
            raise ValueError("palette must contain at least one color")
        self.palette = colors

    def color_index(self, index: int) -> str:
        return self.palette[index % len(self.palette)]

    def color_first_n(self, n: int) -> List[str]:
        """One color per slice, wrapping around the palette."""
        return [self.color_index(i) for i in range(n)]

    def color_repeat(self, index: int, n: int) -> List[str]:
        return [self.color_index(index)] * n
