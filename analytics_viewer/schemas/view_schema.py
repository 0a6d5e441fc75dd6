# analytics_viewer/schemas/view_schema.py

from pydantic import BaseModel, ConfigDict, Field, computed_field
from typing import List, Optional, Union


class ViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)


# --- Tarjetas ---
class StatCard(ViewModel):
    label: str
    value: str


class DetailCard(ViewModel):
    """Tarjeta de horario operativo o de perfil entre semana / fin de semana."""
    label: str
    details: str
    percentage: Optional[str] = None
    consumption: Optional[str] = None
    is_night: bool = False


# --- Barras de comparación ---
class ComparisonBar(ViewModel):
    label: str
    value: float
    display_value: str
    ratio: float
    is_current: bool = False
    color: str

    @computed_field
    @property
    def width_percent(self) -> float:
        return round(self.ratio * 100, 4)


class ComparisonPanel(ViewModel):
    title: str
    bars: List[ComparisonBar] = Field(default_factory=list)


# --- Mapa de calor ---
class HeatmapCell(ViewModel):
    day: str
    hour: int
    value: float
    intensity: float
    background_color: str
    text_color: str
    tooltip: str


class HeatmapRow(ViewModel):
    day: str
    cells: List[HeatmapCell]


class HeatmapGrid(ViewModel):
    hours: List[int]
    rows: List[HeatmapRow]
    max_value: float

    @property
    def cells(self) -> List[HeatmapCell]:
        return [cell for row in self.rows for cell in row.cells]

    def cell(self, day: str, hour: int) -> HeatmapCell:
        for row in self.rows:
            if row.day == day:
                return row.cells[hour]
        raise KeyError(day)


# --- Gráficas (se dibujan con plotly en chart_service) ---
class BarChartView(ViewModel):
    title: str
    x_labels: List[str]
    values: List[float]
    hover_text: List[str]
    color: str
    series_name: str = ""
    height: int = 400


class LoadProfileChartView(ViewModel):
    title: str
    hours: List[Union[int, str]]
    average: List[float]
    min_range: List[float]
    max_range: List[float]
    peak_hour: Union[int, str]
    peak_value: float
    peak_caption: str
    line_color: str
    max_band_color: Optional[str] = None
    min_band_color: Optional[str] = None
    area_fill_color: Optional[str] = None
    average_name: str = "Average"
    height: int = 400


# --- Bloques de revisión ---
class ComparisonBadge(ViewModel):
    arrow: str
    text: str


class ReviewBlock(ViewModel):
    title: str
    accent_color: Optional[str] = None
    header_color: Optional[str] = None
    badge: Optional[ComparisonBadge] = None
    summary_cards: List[StatCard]
    daily_chart: Optional[BarChartView] = None
    comparison: Optional[ComparisonPanel] = None
    load_profile: LoadProfileChartView
    heatmap: Optional[HeatmapGrid] = None
    load_profile_cards: List[DetailCard] = Field(default_factory=list)
    operating_hours: List[DetailCard]


# --- Vista completa ---
class FacilityHeaderView(ViewModel):
    facility_name: str
    company_name: str
    address: str
    badge: str


class ReportView(ViewModel):
    period: str
    section_title: str
    quality_line: str
    executive_cards: List[StatCard]
    trend_chart: BarChartView
    comparison: Optional[ComparisonPanel] = None
    typical_profile: Optional[LoadProfileChartView] = None
    reviews_title: str
    reviews: List[ReviewBlock] = Field(default_factory=list)
