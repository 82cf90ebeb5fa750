from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class ChartOptions(BaseModel):
    chart_kind: str = "pie"
    title: str = ""
    scale_kind: str = "linear"
    x_label: str = ""
    y_label: str = ""
    zero_based: bool = False
    palette: Optional[str] = Field(None, description="Built-in palette name; defaults to the configured one.")


class ChartRequest(ChartOptions):
    rows: List[Dict[str, Any]]


class PointModel(BaseModel):
    x: str
    y: str
    r: Optional[str] = None


class DatasetModel(BaseModel):
    fill: bool
    label: str = ""
    border_color: Union[str, List[str]] = ""
    background_color: Union[str, List[str]] = ""
    simple_data: List[str] = Field(default_factory=list)
    complex_data: List[PointModel] = Field(default_factory=list)


class ChartSpecResponse(BaseModel):
    chart_kind: str
    labels: List[str]
    datasets: List[DatasetModel]
    uses_time_scale: bool
    title: str
    scale_kind: str
    x_label: str
    y_label: str
    zero_based: bool
    tooltip_callback: str
    request_id: Optional[str] = None


class RenderResponse(BaseModel):
    config: str
    html: str
    request_id: Optional[str] = None
