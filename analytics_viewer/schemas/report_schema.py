# analytics_viewer/schemas/report_schema.py

from pydantic import BaseModel, ConfigDict, Field, AliasChoices
from typing import Any, Dict, List, Literal, Optional, Union
from enum import Enum


# --- Periodos soportados por el visor ---
class ReportPeriod(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class PayloadModel(BaseModel):
    """Base inmutable para todo lo que llega del servicio de analítica."""
    model_config = ConfigDict(frozen=True, extra="ignore")


# --- Encabezado de la instalación ---
class FacilityInfo(PayloadModel):
    company_name: str = ""
    facility_name: str = ""
    address: str = ""


# --- Calidad de datos (se muestra tal cual) ---
class DataQualityIndicators(PayloadModel):
    total_values: Union[int, float, str]
    total_missing: Union[int, float, str]
    percentage_missing: Union[str, float]
    # El servicio remoto lo envía como "measurment_interval_minutes"
    measurement_interval_minutes: Union[int, float, str] = Field(
        validation_alias=AliasChoices("measurement_interval_minutes", "measurment_interval_minutes")
    )


# --- Perfil de carga horario ---
class HourlyPoint(PayloadModel):
    hour: Union[int, str]
    average_load: float
    min_range: float = 0.0
    max_range: float = 0.0


class PeakEvent(PayloadModel):
    hour: Union[int, str]
    value: float
    formatted_hour: str = ""


class HourlyProfile(PayloadModel):
    # El perfil típico del día usa "hourly_data", las revisiones "graph_data"
    graph_data: List[HourlyPoint] = Field(
        validation_alias=AliasChoices("graph_data", "hourly_data")
    )
    peak_event: PeakEvent


# --- Bloques compartidos por las revisiones ---
class ComparisonWithPrevious(PayloadModel):
    direction: Literal["increase", "decrease"]
    percentage: Union[str, float]


class OperatingHoursBucket(PayloadModel):
    label: str
    percentage: Union[str, float]
    energy_consumption: float
    avg_kva: float
    min_kva: float
    max_kva: float


class OperatingHours(PayloadModel):
    daytime: OperatingHoursBucket
    nighttime: OperatingHoursBucket


class LoadStats(PayloadModel):
    average: float
    min: float
    max: float


class LoadProfileAnalysis(PayloadModel):
    weekday: LoadStats
    weekend: LoadStats


class ComparisonItem(PayloadModel):
    label: str
    value_kwh: float


class DaySummaryCards(PayloadModel):
    total_energy_consumption: float
    peak_kva: float
    energy_cost: float


class PeriodSummaryCards(DaySummaryCards):
    daily_avg_energy: float
    weekday_avg_energy: float
    weekend_avg_energy: float


# --- Series de tendencia por periodo ---
class DailyTrendPoint(PayloadModel):
    formatted_date: str
    consumption_kwh: float


class WeeklyTrendPoint(PayloadModel):
    week_label: str
    total_consumption_kwh: float


class MonthlyTrendPoint(PayloadModel):
    month_label: str
    total_consumption_kwh: float


class WeekDayConsumption(PayloadModel):
    day: str
    consumption_kwh: float


class MonthDayConsumption(PayloadModel):
    date: str
    full_date: str = ""
    consumption_kwh: float


class DayConsumptionSummary(PayloadModel):
    daily_consumption: List[DailyTrendPoint] = Field(default_factory=list)


class WeekConsumptionSummary(PayloadModel):
    weekly_consumption: List[WeeklyTrendPoint] = Field(default_factory=list)


class MonthConsumptionSummary(PayloadModel):
    monthly_consumption: List[MonthlyTrendPoint] = Field(default_factory=list)


class EnergyLoadSummary(PayloadModel):
    total_energy_consumed: float
    peak_load: float
    total_energy_cost: float
    load_factor: Union[float, str]


class DayEnergyLoadSummary(EnergyLoadSummary):
    consumption_summary: DayConsumptionSummary
    typical_day_profile: HourlyProfile


class WeekEnergyLoadSummary(EnergyLoadSummary):
    consumption_summary: WeekConsumptionSummary


class MonthEnergyLoadSummary(EnergyLoadSummary):
    consumption_summary: MonthConsumptionSummary


# --- Revisiones por sub-periodo ---
class DayReview(PayloadModel):
    formatted_date: str
    summary_cards: DaySummaryCards
    operating_hours: OperatingHours
    hourly_load_profile: HourlyProfile
    comparison_with_previous: Optional[ComparisonWithPrevious] = None


class WeekReview(PayloadModel):
    week_label: str
    full_week_label: str = ""
    summary_cards: PeriodSummaryCards
    operating_hours: OperatingHours
    hourly_load_profile: HourlyProfile
    daily_consumption_chart: List[WeekDayConsumption] = Field(default_factory=list)
    week_comparison_list: List[ComparisonItem] = Field(default_factory=list)
    # Día de la semana -> hora (0-23) -> consumo; puede venir incompleta
    consumption_pattern_table: Dict[str, Dict[int, Optional[float]]] = Field(default_factory=dict)
    load_profile_analysis: LoadProfileAnalysis
    comparison_with_previous: Optional[ComparisonWithPrevious] = None


class MonthReview(PayloadModel):
    month_label: str
    summary_cards: PeriodSummaryCards
    operating_hours: OperatingHours
    hourly_load_profile: HourlyProfile
    daily_consumption_chart: List[MonthDayConsumption] = Field(default_factory=list)
    week_comparison_list: List[ComparisonItem] = Field(default_factory=list)
    load_profile_analysis: LoadProfileAnalysis
    comparison_with_previous: Optional[ComparisonWithPrevious] = None


# --- REPORTE COMPLETO (variante cerrada por periodo) ---
class BaseReport(PayloadModel):
    facility_info: FacilityInfo
    data_quality_indicators: DataQualityIndicators


class DayReport(BaseReport):
    period: Literal["day"]
    energy_load_summary: DayEnergyLoadSummary
    performance_reviews: List[DayReview] = Field(default_factory=list)


class WeekReport(BaseReport):
    period: Literal["week"]
    energy_load_summary: WeekEnergyLoadSummary
    performance_reviews: List[WeekReview] = Field(default_factory=list)


class MonthReport(BaseReport):
    period: Literal["month"]
    energy_load_summary: MonthEnergyLoadSummary
    performance_reviews: List[MonthReview] = Field(default_factory=list)


class UnrecognizedReport(PayloadModel):
    """Periodo desconocido: solo se conserva lo necesario para el encabezado."""
    period: Any = None
    facility_info: Optional[FacilityInfo] = None


Report = Union[DayReport, WeekReport, MonthReport, UnrecognizedReport]

_REPORT_MODELS = {
    ReportPeriod.DAY.value: DayReport,
    ReportPeriod.WEEK.value: WeekReport,
    ReportPeriod.MONTH.value: MonthReport,
}


def parse_report(payload: Any) -> Report:
    """
    Valida el payload del servicio una sola vez, eligiendo el modelo por "period".
    Lanza pydantic.ValidationError si la estructura requerida no es válida.
    """
    period = payload.get("period") if isinstance(payload, dict) else None
    model = _REPORT_MODELS.get(period) if isinstance(period, str) else None
    if model is None:
        return UnrecognizedReport.model_validate(payload)
    return model.model_validate(payload)
