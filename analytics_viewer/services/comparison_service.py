# analytics_viewer/services/comparison_service.py

from typing import Callable, Iterable, List, NamedTuple, Optional, Tuple

from analytics_viewer.schemas import ComparisonBar, ComparisonPanel


class NormalizedItem(NamedTuple):
    label: str
    value: float
    ratio: float
    is_current: bool


def normalize_comparison(items: Iterable[Tuple[str, float]], current_label: Optional[str] = None) -> List[NormalizedItem]:
    """
    Proporción de cada valor respecto al máximo de SU lista (0..1).
    Si el máximo es 0 todas las proporciones son 0.
    """
    items = list(items)
    if not items:
        return []

    # El máximo se calcula una sola vez por lista
    max_value = max(value for _, value in items)

    normalized = []
    for label, value in items:
        ratio = value / max_value if max_value > 0 else 0.0
        normalized.append(NormalizedItem(
            label=label,
            value=value,
            ratio=min(max(ratio, 0.0), 1.0),
            is_current=current_label is not None and label == current_label
        ))
    return normalized


def build_comparison_panel(
    title: str,
    items: Iterable[Tuple[str, float]],
    format_value: Callable[[float], str],
    highlight_color: str,
    neutral_color: str,
    current_label: Optional[str] = None
) -> ComparisonPanel:
    bars = [
        ComparisonBar(
            label=item.label,
            value=item.value,
            display_value=format_value(item.value),
            ratio=item.ratio,
            is_current=item.is_current,
            color=highlight_color if item.is_current else neutral_color
        )
        for item in normalize_comparison(items, current_label)
    ]
    return ComparisonPanel(title=title, bars=bars)
