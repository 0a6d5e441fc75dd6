# analytics_viewer/services/heatmap_service.py

from typing import Dict, Mapping, Optional

from analytics_viewer.schemas import HeatmapCell, HeatmapRow, HeatmapGrid

HEATMAP_DAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
HEATMAP_HOURS = tuple(range(24))

HEATMAP_BASE_RGB = (76, 175, 80)
LIGHT_TEXT_THRESHOLD = 0.6  # por encima de esto el texto pasa a blanco


def find_max_value(table: Mapping[str, Mapping]) -> float:
    '''Máximo de todas las celdas presentes en la tabla'''
    max_value = 0.0
    for hours in table.values():
        for value in hours.values():
            if value is not None and value > max_value:
                max_value = value
    return max_value


def intensity_for(value: float, max_value: float) -> float:
    return value / max_value if max_value > 0 else 0.0


def _hours_by_int(hours: Optional[Mapping]) -> Dict[int, float]:
    # Las horas pueden venir como "9" o 9
    return {int(hour): (value or 0) for hour, value in (hours or {}).items()}


def _tooltip(value: float) -> str:
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{text} kWh"


def _cell(day: str, hour: int, value: float, max_value: float) -> HeatmapCell:
    intensity = intensity_for(value, max_value)
    r, g, b = HEATMAP_BASE_RGB
    return HeatmapCell(
        day=day,
        hour=hour,
        value=value,
        intensity=intensity,
        background_color=f"rgba({r}, {g}, {b}, {intensity:g})",
        text_color="white" if intensity > LIGHT_TEXT_THRESHOLD else "black",
        tooltip=_tooltip(value)
    )


def build_heatmap(table: Mapping[str, Mapping]) -> HeatmapGrid:
    """
    Rejilla densa 7x24 a partir de la tabla dispersa día -> hora -> consumo.
    Las celdas ausentes valen 0 con intensidad 0.
    """
    table = table or {}
    max_value = find_max_value(table)

    rows = []
    for day in HEATMAP_DAYS:
        hours = _hours_by_int(table.get(day))
        rows.append(HeatmapRow(
            day=day,
            cells=[_cell(day, hour, hours.get(hour, 0), max_value) for hour in HEATMAP_HOURS]
        ))

    return HeatmapGrid(hours=list(HEATMAP_HOURS), rows=rows, max_value=max_value)
