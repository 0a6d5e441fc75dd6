# analytics_viewer/schemas/request_schema.py

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional

from .report_schema import Report


# --- Request para generar el reporte en el servicio remoto ---
class ReportRequest(BaseModel):
    data_id: str = Field(min_length=1)
    company_name: str = ""
    facility_name: str = ""
    address: str = ""
    filename: str = ""
    tariff_rate: float = 0

    @field_validator("data_id", "company_name", "facility_name", "address", "filename", mode="before")
    def strip_text(cls, v):
        if v is None:
            return ""
        return str(v).strip()

    def request_body(self) -> dict:
        """Cuerpo JSON que espera el servicio (el data_id va en la URL)."""
        return self.model_dump(exclude={"data_id"})


# --- Resultado de una petición: reporte o error, nunca ambos ---
class ReportOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    report: Optional[Report] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def check_exclusive(self):
        if self.report is not None and self.error is not None:
            raise ValueError("Un resultado no puede tener reporte y error a la vez")
        return self
