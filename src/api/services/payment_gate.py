"""
Payment gate.

Reports are only served once unlocked. Order/payment flows live in the
payment provider; here an invite code is the only way to unlock.
"""

import logging
from typing import Iterable, Optional

logger = logging.getLogger(__name__)


class PaymentGate:
    """Answers whether a request may see the full report."""

    def __init__(self, invite_codes: Iterable[str]):
        self.invite_codes = {c.strip().lower() for c in invite_codes if c and c.strip()}

    def is_unlocked(self, invite_code: Optional[str]) -> bool:
        if not invite_code:
            return False
        unlocked = invite_code.strip().lower() in self.invite_codes
        if not unlocked:
            logger.info("[INFO] Rejected invite code")
        return unlocked
