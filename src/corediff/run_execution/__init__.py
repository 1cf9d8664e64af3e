"""Run execution domain exports."""

from .corediff_run_use_case import Notifier, execute_corediff_run
from .run_contracts import RunOutcome

__all__ = ["Notifier", "RunOutcome", "execute_corediff_run"]
