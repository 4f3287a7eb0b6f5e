from __future__ import annotations

import logging
import re

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_SESSION_YEAR
from ..core.exceptions import ValidationError
from ..store.locking import AdvisoryLock
from .repository import SettingsRepository

logger = logging.getLogger(__name__)

ACTIVE_SESSION_YEAR = "ACTIVE_SESSION_YEAR"

_SESSION_YEAR = re.compile(r"^\d{4}-\d{2}$")


class SettingsService:
    def __init__(self, settings: SettingsRepository, lock: AdvisoryLock, *, default_year: str = DEFAULT_SESSION_YEAR):
        self._settings = settings
        self._lock = lock
        self._default_year = default_year

    def active_year(self) -> str:
        return self._settings.get(ACTIVE_SESSION_YEAR) or self._default_year

    def update_active_year(self, year: str) -> str:
        year = require_non_empty(year, "Session year")
        if not _SESSION_YEAR.match(year):
            raise ValidationError("Session year must look like 2024-25")
        self._lock.run(lambda: self._settings.put(ACTIVE_SESSION_YEAR, year), ("settings",))
        logger.info("Active session year set to %s", year)
        return year
