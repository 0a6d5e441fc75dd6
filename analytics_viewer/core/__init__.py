from .settings import settings
from .logger import logger, log_critical_error
from .report_state import ReportStateSlot, report_state, get_report_state
