"""AuditSubscriptionLedger Use Case

Scans every subscription period for invariant violations.
"""

import logging
import time
from collections import defaultdict
from datetime import datetime
from typing import Dict, List
from libs.result import Result, Return, Error
from src.app.repositories.subscription_period_repository import SubscriptionPeriodRepository
from src.domain.subscription import SubscriptionPeriod, SubscriptionStatus
from .dtos import LedgerAuditResultDTO, LedgerFindingDTO

logger = logging.getLogger(__name__)


class AuditSubscriptionLedger:
    """
    Use Case: Audit the subscription ledger

    Business Rules:
    1. Read-only; nothing is repaired or rewritten
    2. An owner with more than one ACTIVE period -> MULTIPLE_ACTIVE
    3. A period with end_date <= start_date -> NON_POSITIVE_DURATION
    4. ACTIVE periods already past end_date are counted, not flagged;
       expiry is computed at read time and never stored
    """

    def __init__(self, period_repo: SubscriptionPeriodRepository):
        self.period_repo = period_repo

    async def execute(self, now: datetime) -> Result[LedgerAuditResultDTO]:
        start_time = time.time()

        try:
            periods = await self.period_repo.list()
        except Exception as e:
            return Return.err(
                Error(
                    code="LEDGER_AUDIT_FAILED",
                    message="Failed to load subscription periods",
                    reason=str(e),
                )
            )

        logger.info(f"Auditing {len(periods)} subscription periods")

        by_owner: Dict[str, List[SubscriptionPeriod]] = defaultdict(list)
        for period in periods:
            by_owner[period.owner_id].append(period)

        findings: List[LedgerFindingDTO] = []
        expired_active = 0

        for owner_id, owned in by_owner.items():
            active = [p for p in owned if p.status == SubscriptionStatus.ACTIVE]
            if len(active) > 1:
                findings.append(
                    LedgerFindingDTO(
                        owner_id=owner_id,
                        period_ids=sorted(p.id for p in active),
                        issue="MULTIPLE_ACTIVE",
                    )
                )

            for period in owned:
                if period.end_date <= period.start_date:
                    findings.append(
                        LedgerFindingDTO(
                            owner_id=owner_id,
                            period_ids=[period.id],
                            issue="NON_POSITIVE_DURATION",
                        )
                    )

            expired_active += sum(1 for p in active if p.end_date <= now)

        return Return.ok(
            LedgerAuditResultDTO(
                total_periods_checked=len(periods),
                owners_checked=len(by_owner),
                expired_active_periods=expired_active,
                findings=findings,
                audited_at=now,
                execution_time_ms=int((time.time() - start_time) * 1000),
            )
        )
