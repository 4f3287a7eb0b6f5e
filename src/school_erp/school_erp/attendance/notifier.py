from __future__ import annotations

import logging
from typing import Protocol

from .model import RosterEntry

logger = logging.getLogger(__name__)


class AbsenceNotifier(Protocol):
    def notify_absent(self, *, student: RosterEntry, class_name: str, section: str, date: str) -> None:
        raise NotImplementedError


class LoggingNotifier(AbsenceNotifier):
    """Default notifier: records each notice in the application log."""

    def notify_absent(self, *, student: RosterEntry, class_name: str, section: str, date: str) -> None:
        logger.info(
            "Absence notice: %s (%s) of %s-%s was absent on %s",
            student.name,
            student.admission_no,
            class_name,
            section,
            date,
        )
