from __future__ import annotations

import pandas as pd
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from ..core.settings import Settings, get_settings
from ..schemas.chart import ChartOptions, ChartRequest, ChartSpecResponse, RenderResponse
from ..services import (
    ChartSpec,
    ChartSpecError,
    TableLoader,
    UnknownChartKindError,
    assemble_chart_spec,
    get_palette,
    parse_chart_kind,
    render_chart_config,
    render_chart_page,
    table_from_dataframe,
)
from ..utils.logging import log_event, new_request_id

router = APIRouter(prefix="/chart", tags=["chart"])

_loader = TableLoader()


def _validate_chart_kind(chart_kind: str) -> str:
    try:
        return parse_chart_kind(chart_kind).value
    except UnknownChartKindError as exc:
        raise HTTPException(status_code=400, detail={"code": "UNKNOWN_CHART_KIND", "message": str(exc)}) from exc


def _resolve_palette(name: str | None, settings: Settings) -> list[str]:
    try:
        return get_palette(name or settings.palette)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail={"code": "UNKNOWN_PALETTE", "message": str(exc)}) from exc


def _check_row_limit(row_count: int, settings: Settings) -> None:
    if row_count > settings.max_rows:
        raise HTTPException(
            status_code=413,
            detail={"code": "ROWS_LIMIT_EXCEEDED", "message": f"rows size must be <= {settings.max_rows}"},
        )


def _build_spec(frame: pd.DataFrame, options: ChartOptions, settings: Settings, request_id: str) -> ChartSpec:
    chart_kind = _validate_chart_kind(options.chart_kind)
    palette = _resolve_palette(options.palette, settings)
    _check_row_limit(len(frame), settings)

    table = table_from_dataframe(
        frame,
        chart_kind,
        title=options.title,
        scale_kind=options.scale_kind,
        x_label=options.x_label,
        y_label=options.y_label,
        zero_based=options.zero_based,
    )
    try:
        spec = assemble_chart_spec(table, palette=palette)
    except ChartSpecError as exc:
        log_event("chart.spec.error", {"request_id": request_id, "error": str(exc)}, level="warning")
        raise HTTPException(status_code=400, detail={"code": "INVALID_TABLE", "message": str(exc)}) from exc

    log_event(
        "chart.spec.ready",
        {"request_id": request_id, "chart_kind": spec.chart_kind, "datasets": len(spec.datasets)},
    )
    return spec


def _spec_response(spec: ChartSpec, request_id: str) -> ChartSpecResponse:
    payload = spec.to_public_dict()
    payload["request_id"] = request_id
    return ChartSpecResponse.model_validate(payload)


def _frame_from_rows(req: ChartRequest, settings: Settings) -> pd.DataFrame:
    _check_row_limit(len(req.rows), settings)
    return _loader.prepare_frame(pd.DataFrame(req.rows))


@router.post("/spec", response_model=ChartSpecResponse)
def chart_spec(req: ChartRequest, settings: Settings = Depends(get_settings)) -> ChartSpecResponse:
    request_id = new_request_id()
    log_event("request.chart.spec", {"request_id": request_id, "row_count": len(req.rows)})
    spec = _build_spec(_frame_from_rows(req, settings), req, settings, request_id)
    return _spec_response(spec, request_id)


@router.post("/render", response_model=RenderResponse)
def chart_render(req: ChartRequest, settings: Settings = Depends(get_settings)) -> RenderResponse:
    request_id = new_request_id()
    log_event("request.chart.render", {"request_id": request_id, "row_count": len(req.rows)})
    spec = _build_spec(_frame_from_rows(req, settings), req, settings, request_id)
    config = render_chart_config(spec)
    return RenderResponse(config=config, html=render_chart_page(spec, config), request_id=request_id)


@router.post("/upload", response_model=ChartSpecResponse)
def chart_upload(
    file: UploadFile = File(...),
    chart_kind: str = Form("pie"),
    title: str = Form(""),
    scale_kind: str = Form("linear"),
    x_label: str = Form(""),
    y_label: str = Form(""),
    zero_based: bool = Form(False),
    sheet: str = Form(None),
    settings: Settings = Depends(get_settings),
) -> ChartSpecResponse:
    request_id = new_request_id()
    options = ChartOptions(
        chart_kind=chart_kind,
        title=title,
        scale_kind=scale_kind,
        x_label=x_label,
        y_label=y_label,
        zero_based=zero_based,
    )
    try:
        frame = _loader.load_bytes(file.file.read(), filename=file.filename or "upload.csv", sheet=sheet)
    except ChartSpecError as exc:
        raise HTTPException(status_code=400, detail={"code": "UNREADABLE_TABLE", "message": str(exc)}) from exc
    log_event("request.chart.upload", {"request_id": request_id, "filename": file.filename, "rows": len(frame)})
    spec = _build_spec(frame, options, settings, request_id)
    return _spec_response(spec, request_id)
