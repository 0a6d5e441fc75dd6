# analytics_viewer/core/report_state.py

import threading

from analytics_viewer.schemas.request_schema import ReportOutcome
from .logger import logger


class ReportStateSlot:
    """
    Slot único con el último reporte visible.
    Cada petición recibe una generación; solo la más reciente puede escribir.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._generation = 0
        self._settled_generation = 0
        self._outcome = ReportOutcome()

    @property
    def outcome(self) -> ReportOutcome:
        return self._outcome

    @property
    def is_loading(self) -> bool:
        return self._settled_generation != self._generation

    def begin_request(self) -> int:
        '''Abre una nueva generación y descarta el reporte visible'''
        with self._lock:
            self._generation += 1
            self._outcome = ReportOutcome()
            return self._generation

    def settle(self, generation: int, outcome: ReportOutcome) -> bool:
        '''Aplica el resultado solo si nadie lanzó una petición más nueva'''
        with self._lock:
            if generation != self._generation:
                logger.info(f"⏭️  Respuesta obsoleta ignorada (gen {generation}, actual {self._generation})")
                return False
            self._outcome = outcome
            self._settled_generation = generation
            return True


# un solo slot para todo el proceso: la vista es de un único usuario
report_state = ReportStateSlot()


def get_report_state() -> ReportStateSlot:
    return report_state
