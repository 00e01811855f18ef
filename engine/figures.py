"""Plotly figure construction for every supported chart kind."""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

import plotly.express as px
import plotly.graph_objects as go
from plotly.graph_objs import Figure

from .models import ChartDataset, ChartKind, ChartRequest
from .transformer import PALETTE, palette_color

PRIMARY_COLOR = PALETTE[0]
SECONDARY_COLOR = PALETTE[2]
DONUT_HOLE = 0.4
CARTESIAN_KINDS = frozenset(
    {ChartKind.BAR, ChartKind.LINE, ChartKind.SCATTER, ChartKind.AREA, ChartKind.COMPOSED}
)


def _labels(dataset: ChartDataset) -> List[Any]:
    return [record["label"] for record in dataset.records]


def _column(dataset: ChartDataset, key: str) -> List[Any]:
    return [record.get(key) for record in dataset.records]


def _express(dataset: ChartDataset, request: ChartRequest) -> Figure:
    plot_kwargs: Dict[str, Any] = {
        "data_frame": dataset.to_frame(),
        "x": "label",
        "y": "value",
        "labels": {"label": request.x_field, "value": request.y_field},
        "color_discrete_sequence": [PRIMARY_COLOR],
    }
    kind = ChartKind(dataset.kind)
    if kind is ChartKind.BAR:
        fig = px.bar(**plot_kwargs)
    elif kind is ChartKind.LINE:
        fig = px.line(line_shape="spline", **plot_kwargs)
    elif kind is ChartKind.SCATTER:
        fig = px.scatter(**plot_kwargs)
    else:
        fig = px.area(line_shape="spline", **plot_kwargs)
    fig.update_traces(name=request.y_field, showlegend=True)
    return fig


def _pie(dataset: ChartDataset, request: ChartRequest) -> Figure:
    hole = DONUT_HOLE if ChartKind(dataset.kind) is ChartKind.DONUT else 0.0
    trace = go.Pie(
        labels=[str(label) for label in _labels(dataset)],
        values=_column(dataset, "value"),
        marker={"colors": _column(dataset, "color")},
        hole=hole,
        sort=False,
        textinfo="label+percent",
        name=request.y_field,
    )
    return go.Figure(trace)


def _radar(dataset: ChartDataset, request: ChartRequest) -> Figure:
    fig = go.Figure()
    theta = [str(label) for label in _labels(dataset)]
    for index, series in enumerate(dataset.series):
        color = palette_color(index)
        fig.add_trace(
            go.Scatterpolar(
                r=_column(dataset, series),
                theta=theta,
                name=series,
                fill="toself",
                opacity=0.6,
                line={"color": color},
            )
        )
    return fig


def _funnel(dataset: ChartDataset, request: ChartRequest) -> Figure:
    trace = go.Funnel(
        y=[str(label) for label in _labels(dataset)],
        x=_column(dataset, "value"),
        marker={"color": _column(dataset, "color")},
        textposition="inside",
        name=request.y_field,
    )
    return go.Figure(trace)


def _treemap(dataset: ChartDataset, request: ChartRequest) -> Figure:
    labels = [str(label) for label in _labels(dataset)]
    trace = go.Treemap(
        ids=[str(index) for index in range(len(labels))],
        labels=labels,
        parents=[""] * len(labels),
        values=_column(dataset, "size"),
        marker={"colors": _column(dataset, "color"), "line": {"color": "#fff", "width": 1}},
        name=request.y_field,
    )
    return go.Figure(trace)


def _composed(dataset: ChartDataset, request: ChartRequest) -> Figure:
    labels = _labels(dataset)
    values = _column(dataset, "value")
    fig = go.Figure()
    fig.add_trace(go.Bar(x=labels, y=values, name=request.y_field, marker_color=PRIMARY_COLOR))
    fig.add_trace(
        go.Scatter(
            x=labels,
            y=values,
            name=request.y_field,
            mode="lines",
            line={"color": SECONDARY_COLOR, "width": 2, "shape": "spline"},
        )
    )
    fig.update_layout(xaxis_title=request.x_field, yaxis_title=request.y_field)
    return fig


def _radial_bar(dataset: ChartDataset, request: ChartRequest) -> Figure:
    trace = go.Barpolar(
        r=_column(dataset, "percentage"),
        theta=[str(label) for label in _labels(dataset)],
        marker_color=_column(dataset, "color"),
        customdata=_column(dataset, "value"),
        hovertemplate="%{theta}: %{customdata} (%{r:.1f}%)<extra></extra>",
        name=request.y_field,
    )
    return go.Figure(trace)


_BUILDERS: Dict[ChartKind, Callable[[ChartDataset, ChartRequest], Figure]] = {
    ChartKind.BAR: _express,
    ChartKind.LINE: _express,
    ChartKind.SCATTER: _express,
    ChartKind.AREA: _express,
    ChartKind.COMPOSED: _composed,
    ChartKind.PIE: _pie,
    ChartKind.DONUT: _pie,
    ChartKind.RADAR: _radar,
    ChartKind.FUNNEL: _funnel,
    ChartKind.TREEMAP: _treemap,
    ChartKind.RADIAL_BAR: _radial_bar,
}


def build_figure(
    dataset: ChartDataset,
    request: ChartRequest,
    *,
    show_grid: bool = True,
    show_legend: bool = True,
    dark_mode: bool = False,
    layout: Optional[Mapping[str, Any]] = None,
) -> Figure:
    """Map ``dataset`` onto Plotly traces for its chart kind."""

    kind = ChartKind(dataset.kind)
    fig = _BUILDERS[kind](dataset, request)

    if kind in CARTESIAN_KINDS:
        fig.update_xaxes(showgrid=show_grid)
        fig.update_yaxes(showgrid=show_grid)
    elif kind in (ChartKind.RADAR, ChartKind.RADIAL_BAR):
        fig.update_polars(radialaxis_showgrid=show_grid, angularaxis_showgrid=show_grid)

    fig.update_layout(
        showlegend=show_legend,
        template="plotly_dark" if dark_mode else "plotly_white",
        margin={"t": 20, "r": 30, "l": 20, "b": 20},
    )
    if layout:
        fig.update_layout(**layout)
    return fig


__all__ = ["build_figure"]
