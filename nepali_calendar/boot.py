"""Hook implementations that integrate the Nepali calendar with Frappe."""
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional

from .api import calendar_data
from .api.converter import EPOCH_ANCHOR
from .api.errors import ConversionOutOfRangeError
from .api.formatting import AD_MONTHS, BS_MONTHS
from .api.tools import get_today
from .api.validation import AD_YEAR_RANGE, BS_YEAR_RANGE

logger = logging.getLogger(__name__)


def _today_context(today: Optional[date]) -> Optional[Dict[str, object]]:
    try:
        return get_today(today)
    except ConversionOutOfRangeError:
        logger.warning("Server date %s is outside the BS table; boot payload has no today", today or date.today())
        return None


def get_boot_context(today: Optional[date] = None) -> Dict[str, object]:
    """Constraints and labels the client-side date picker needs."""

    return {
        "bs_year_range": [BS_YEAR_RANGE.first, BS_YEAR_RANGE.last],
        "ad_year_range": [AD_YEAR_RANGE.first, AD_YEAR_RANGE.last],
        "bs_months": list(BS_MONTHS),
        "ad_months": list(AD_MONTHS),
        "bs_table_days": calendar_data.total_days(),
        "epoch_anchor": {
            "bs": EPOCH_ANCHOR.bs.isoformat(),
            "ad": EPOCH_ANCHOR.ad.isoformat(),
        },
        "today": _today_context(today),
    }


def boot_session(bootinfo):
    """Inject the calendar context into the boot payload."""

    context = get_boot_context()
    if isinstance(bootinfo, dict):
        bootinfo.setdefault("nepali_calendar", context)
    else:  # ``bootinfo`` is typically a ``frappe._dict``
        setattr(bootinfo, "nepali_calendar", context)
