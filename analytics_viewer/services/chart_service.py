# analytics_viewer/services/chart_service.py

import plotly.graph_objects as go

from analytics_viewer.schemas import BarChartView, LoadProfileChartView

PEAK_MARKER_COLOR = "red"
GRID_COLOR = "#e0e0e0"

_PLOTLY_CONFIG = {"displayModeBar": False, "responsive": True}


def _base_layout(fig: go.Figure, height: int, show_legend: bool):
    fig.update_layout(
        template="plotly_white",
        height=height,
        margin=dict(l=40, r=20, t=20, b=40),
        showlegend=show_legend,
        legend=dict(orientation="h", yanchor="bottom", y=-0.3, xanchor="center", x=0.5),
        hovermode="x unified",
    )
    fig.update_xaxes(showgrid=True, gridcolor=GRID_COLOR, griddash="dash")
    fig.update_yaxes(showgrid=True, gridcolor=GRID_COLOR, griddash="dash")


def build_bar_figure(chart: BarChartView) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=chart.x_labels,
        y=chart.values,
        name=chart.series_name,
        marker_color=chart.color,
        hovertext=chart.hover_text,
        hoverinfo="text",
    ))
    _base_layout(fig, chart.height, show_legend=bool(chart.series_name))
    return fig


def build_load_profile_figure(chart: LoadProfileChartView) -> go.Figure:
    """
    Banda min/max + línea promedio + un único marcador en el pico.
    El pico se dibuja donde dice el payload, no se recalcula.
    """
    fig = go.Figure()

    if chart.max_band_color:
        fig.add_trace(go.Scatter(
            x=chart.hours, y=chart.max_range, name="Max Range",
            mode="lines", line=dict(width=0, shape="spline"),
            fill="tozeroy", fillcolor=chart.max_band_color,
        ))
    if chart.min_band_color:
        fig.add_trace(go.Scatter(
            x=chart.hours, y=chart.min_range, name="Min Range",
            mode="lines", line=dict(width=0, shape="spline"),
            fill="tozeroy", fillcolor=chart.min_band_color,
        ))

    fig.add_trace(go.Scatter(
        x=chart.hours, y=chart.average, name=chart.average_name,
        mode="lines", line=dict(color=chart.line_color, width=2, shape="spline"),
        fill="tozeroy" if chart.area_fill_color else None,
        fillcolor=chart.area_fill_color,
    ))

    fig.add_trace(go.Scatter(
        x=[chart.peak_hour], y=[chart.peak_value], name="Peak",
        mode="markers", marker=dict(color=PEAK_MARKER_COLOR, size=12),
        showlegend=False,
    ))

    _base_layout(fig, chart.height, show_legend=chart.max_band_color is not None)
    return fig


def build_figure(chart) -> go.Figure:
    if isinstance(chart, LoadProfileChartView):
        return build_load_profile_figure(chart)
    return build_bar_figure(chart)


def figure_to_html(fig: go.Figure, div_id: str) -> str:
    # plotly.js se carga una sola vez desde la plantilla base
    return fig.to_html(full_html=False, include_plotlyjs=False, div_id=div_id, config=_PLOTLY_CONFIG)
