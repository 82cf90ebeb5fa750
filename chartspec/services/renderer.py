from __future__ import annotations

from pathlib import Path
from textwrap import indent
from typing import Optional

from jinja2 import Template

from .classifier import ChartMode
from .models import ChartSpec

TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "runtime"
CONFIG_TEMPLATE_PATH = TEMPLATE_DIR / "chartjs_config.js.j2"
PAGE_TEMPLATE_PATH = TEMPLATE_DIR / "chart_page.html.j2"

_LINEAR_X_MODES = {ChartMode.scatter_line.value, ChartMode.denormalised_scatter_line.value}


def _load_template(path: Path) -> Template:
    return Template(path.read_text(encoding="utf-8"), trim_blocks=True, lstrip_blocks=True)


def x_axis_type(spec: ChartSpec) -> Optional[str]:
    if spec.uses_time_scale:
        return "time"
    if spec.actual_mode in _LINEAR_X_MODES:
        return "linear"
    return None


def render_chart_config(spec: ChartSpec) -> str:
    """Render ``spec`` into the literal Chart.js configuration object."""

    template = _load_template(CONFIG_TEMPLATE_PATH)
    return template.render(
        spec=spec,
        tooltip_body=indent(spec.tooltip_callback, " " * 20),
        x_axis_type=x_axis_type(spec),
        y_axis_type=spec.scale_kind or "linear",
    )


def render_chart_page(spec: ChartSpec, config: str | None = None) -> str:
    """Standalone HTML page drawing ``spec`` with Chart.js."""

    template = _load_template(PAGE_TEMPLATE_PATH)
    return template.render(title=spec.title or "chart", config=config or render_chart_config(spec))
