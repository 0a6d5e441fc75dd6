# analytics_viewer/services/formatting_service.py

from decimal import Decimal, ROUND_HALF_UP

from analytics_viewer.core import settings

# Símbolos que en-US muestra; cualquier otro código sale como "NGN\u00a0123,456.79"
CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}

# Espacio duro entre el código ISO y el importe
CODE_SEPARATOR = "\u00a0"

_INTEGER = Decimal("1")
_CENTS = Decimal("0.01")


def _quantize(value, step: Decimal) -> Decimal:
    rounded = Decimal(str(value)).quantize(step, rounding=ROUND_HALF_UP)
    # Evitar "-0" y "-0.00"
    return rounded.copy_abs() if rounded.is_zero() else rounded


def format_number(value) -> str:
    """Entero redondeado con separador de miles: 1234.5 -> "1,235"."""
    return f"{_quantize(value, _INTEGER):,}"


def format_decimal(value) -> str:
    """Dos decimales fijos con separador de miles: 1234.5 -> "1,234.50"."""
    return f"{_quantize(value, _CENTS):,.2f}"


def format_currency(value, currency_code: str = "NGN") -> str:
    amount = _quantize(value, _CENTS)
    sign = "-" if amount < 0 else ""
    code = currency_code.upper()
    symbol = CURRENCY_SYMBOLS.get(code, code + CODE_SEPARATOR)
    return f"{sign}{symbol}{amount.copy_abs():,.2f}"


def format_verbatim(value) -> str:
    """Campos que se muestran tal cual llegan (load factor, porcentajes)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ReportFormatter:
    """Agrupa los formateadores con la moneda configurada."""

    def __init__(self, currency_code: str = "NGN"):
        self.currency_code = currency_code

    def number(self, value) -> str:
        return format_number(value)

    def decimal(self, value) -> str:
        return format_decimal(value)

    def currency(self, value) -> str:
        return format_currency(value, self.currency_code)

    def verbatim(self, value) -> str:
        return format_verbatim(value)


def get_report_formatter() -> ReportFormatter:
    return ReportFormatter(settings.CURRENCY_CODE)
