import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

load_dotenv()

from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from chartspec.core.settings import get_settings
from chartspec.services import (
    ChartKind,
    ChartSpec,
    ChartSpecError,
    TableLoader,
    assemble_chart_spec,
    column_groups,
    get_palette,
    render_chart_config,
    render_chart_page,
    table_from_dataframe,
)
from chartspec.utils.artifacts import ArtifactWriter
from chartspec.utils.logging import log_event

console = Console(soft_wrap=False)


def _trim(text: str, limit: int = 70) -> str:
    text = text.strip()
    if not text:
        return ""
    return text if len(text) <= limit else f"{text[: limit - 1]}..."


def _preview(tokens: List[str], limit: int = 6) -> str:
    shown = ", ".join(tokens[:limit])
    return shown + (f", ... (+{len(tokens) - limit})" if len(tokens) > limit else "")


def _build_summary_panel(spec: ChartSpec, groups: Dict[str, List[str]], rows: int) -> Panel:
    summary = Table.grid(padding=(0, 2))
    summary.add_column(style="cyan", justify="right", no_wrap=True)
    summary.add_column(style="bold white")
    summary.add_row("Rows", str(rows))
    summary.add_row("Numeric", ", ".join(map(str, groups["floats"])) or "-")
    summary.add_row("Time", ", ".join(map(str, groups["times"])) or "-")
    summary.add_row("Text", ", ".join(map(str, groups["strings"])) or "-")
    summary.add_row("Chart.js type", spec.chart_kind)
    summary.add_row("Mode", spec.actual_mode)
    summary.add_row("Time scale", "yes" if spec.uses_time_scale else "no")
    if spec.labels:
        summary.add_row("Labels", _trim(_preview(spec.labels), 60))
    return Panel(summary, title="Chart", border_style="green")


def _build_dataset_table(spec: ChartSpec) -> Table:
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="cyan", no_wrap=True)
    table.add_column("Label", style="magenta")
    table.add_column("Color", style="white", no_wrap=True)
    table.add_column("Data", style="white", overflow="fold")
    for idx, ds in enumerate(spec.datasets):
        color = ds.background_color if isinstance(ds.background_color, str) else _preview(ds.background_color, 3)
        if ds.complex_data:
            points = [f"({p.x}, {p.y}{', r=' + p.r if p.r is not None else ''})" for p in ds.complex_data]
            data = _preview(points, 4)
        else:
            data = _preview(ds.simple_data)
        table.add_row(str(idx), ds.label or "-", color or "-", data or "-")
    return table


def _read_frame(loader: TableLoader, path: str, sheet: Optional[str]):
    if path == "-":
        return loader.load_bytes(sys.stdin.buffer.read(), filename="stdin.csv")
    return loader.load_path(path, sheet=sheet)


def main() -> None:
    parser = argparse.ArgumentParser(description="Build a Chart.js chart from a CSV/TSV/Excel table.")
    parser.add_argument("path", help="table file, or - to read CSV from stdin")
    parser.add_argument("--kind", default=ChartKind.pie.value, choices=[k.value for k in ChartKind])
    parser.add_argument("--title", default="")
    parser.add_argument("--x-label", default="")
    parser.add_argument("--y-label", default="")
    parser.add_argument("--scale", default="linear", choices=["linear", "logarithmic"])
    parser.add_argument("--zero-based", action="store_true")
    parser.add_argument("--sheet", default=None)
    parser.add_argument("--palette", default=None)
    parser.add_argument("--output", default=None, help="directory for chart.html / chart.js / spec.json")
    parser.add_argument("--no-output", action="store_true", help="do not write artifacts")
    parser.add_argument("--print-config", action="store_true")
    parser.add_argument("--json", action="store_true", help="print the spec as JSON")
    args = parser.parse_args()

    settings = get_settings()
    loader = TableLoader()

    try:
        palette = get_palette(args.palette or settings.palette)
        frame = _read_frame(loader, args.path, args.sheet)
        table = table_from_dataframe(
            frame,
            args.kind,
            title=args.title,
            scale_kind=args.scale,
            x_label=args.x_label,
            y_label=args.y_label,
            zero_based=args.zero_based,
        )
        spec = assemble_chart_spec(table, palette=palette)
    except (ChartSpecError, ValueError) as exc:
        log_event("cli.failed", {"path": args.path, "error": str(exc)}, level="error")
        console.print(Panel(str(exc), title="Error", border_style="red"))
        raise SystemExit(1) from exc

    config = render_chart_config(spec)

    console.print(_build_summary_panel(spec, column_groups(frame).as_dict(), table.row_count))
    console.print(Panel(_build_dataset_table(spec), title=f"Datasets ({len(spec.datasets)})", border_style="blue"))

    if args.print_config:
        console.print(Panel(Syntax(config, "javascript", word_wrap=True), title="Chart.js config", border_style="cyan"))
    if args.json:
        console.print(Panel(JSON.from_data(spec.to_public_dict(), indent=2), title="Spec", border_style="cyan", expand=False))

    if args.no_output:
        return

    run_inputs: Dict[str, Any] = {
        "path": args.path,
        "kind": args.kind,
        "title": args.title,
        "scale": args.scale,
        "zero_based": args.zero_based,
        "sheet": args.sheet,
    }
    writer = ArtifactWriter(Path(args.output) if args.output else settings.output_root)
    run_dir = writer.persist(spec, config, render_chart_page(spec, config), run_inputs)
    log_event("cli.artifacts_written", {"run_dir": str(run_dir)})
    console.print(f"[dim]saved {run_dir / 'chart.html'}[/]")


if __name__ == "__main__":
    main()
