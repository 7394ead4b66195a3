"""Subscription Ledger Audit Background Worker

Periodically scans the subscription ledger for invariant violations
(several ACTIVE periods for one owner, periods that end before they start).
Can be run as a standalone script or integrated with a scheduler.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from config import ApplicationConfig
from src.app.use_cases.marketplace import AuditSubscriptionLedger, LedgerAuditResultDTO
from src.depends import StorageBackend, create_backend

logger = logging.getLogger(__name__)


class LedgerAuditorWorker:
    """
    Background worker for subscription ledger audits

    Features:
    - Read-only: findings are logged, never repaired
    - Can run once or continuously
    - Configurable interval (default: LEDGER_AUDIT_INTERVAL_SECONDS)

    Usage:
        worker = LedgerAuditorWorker()
        result = await worker.run_once()

        await worker.run_forever(interval_seconds=3600)
    """

    def __init__(self, backend: Optional[StorageBackend] = None):
        """
        Initialize the worker

        Args:
            backend: Storage backend (defaults to the configured one)
        """
        self.backend = backend or create_backend(ApplicationConfig)
        logger.info("LedgerAuditorWorker initialized")

    async def run_once(self, now: Optional[datetime] = None) -> LedgerAuditResultDTO:
        """
        Run the audit once

        Args:
            now: Reference time for expiry counting (defaults to the current UTC time)

        Returns:
            LedgerAuditResultDTO with findings
        """
        now = now or datetime.now(timezone.utc)

        if not self.backend.config.LEDGER_AUDIT_ENABLED:
            logger.info("Ledger audit is disabled, skipping")
            return LedgerAuditResultDTO(
                total_periods_checked=0,
                owners_checked=0,
                expired_active_periods=0,
                findings=[],
                audited_at=now,
                execution_time_ms=0,
            )

        async with self.backend.marketplace() as marketplace:
            use_case = AuditSubscriptionLedger(marketplace.period_repo)
            result = await use_case.execute(now)

        if result.is_err():
            logger.error(f"Ledger audit failed: {result.error.message}")
            raise RuntimeError(f"Ledger audit failed: {result.error.message}")

        response = result.value

        if response.findings:
            logger.error(f"ALERT: {len(response.findings)} subscription ledger violations found!")
            for finding in response.findings:
                logger.error(
                    f"  - Owner {finding.owner_id}: {finding.issue} "
                    f"(periods {finding.period_ids})"
                )

        return response

    async def run_forever(self, interval_seconds: Optional[int] = None):
        """
        Run the audit continuously

        Args:
            interval_seconds: Seconds between runs
        """
        interval_seconds = interval_seconds or self.backend.config.LEDGER_AUDIT_INTERVAL_SECONDS
        logger.info(f"Starting continuous ledger audit with {interval_seconds}s interval")

        while True:
            try:
                result = await self.run_once()
                logger.info(
                    f"Ledger audit complete. Checked {result.total_periods_checked} periods "
                    f"across {result.owners_checked} owners, "
                    f"{len(result.findings)} findings, "
                    f"{result.expired_active_periods} expired active periods "
                    f"in {result.execution_time_ms}ms"
                )
            except Exception as e:
                logger.error(f"Ledger audit cycle failed: {e}")

            await asyncio.sleep(interval_seconds)

    async def shutdown(self):
        """Cleanup resources"""
        await self.backend.dispose()
        logger.info("LedgerAuditorWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        python -m src.worker.ledger_auditor --once
        python -m src.worker.ledger_auditor --interval 600
    """
    import argparse

    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Subscription Ledger Audit Worker")
    parser.add_argument("--once", action="store_true", help="Run once and exit")
    parser.add_argument(
        "--interval", type=int, default=None,
        help="Interval between runs in seconds"
    )
    args = parser.parse_args()

    worker = LedgerAuditorWorker()

    try:
        await worker.backend.init()
        if args.once:
            result = await worker.run_once()
            print("Ledger audit complete:")
            print(f"  Periods checked: {result.total_periods_checked}")
            print(f"  Owners checked: {result.owners_checked}")
            print(f"  Expired active periods: {result.expired_active_periods}")
            print(f"  Findings: {len(result.findings)}")
            for finding in result.findings:
                print(f"  - Owner {finding.owner_id}: {finding.issue} {finding.period_ids}")
        else:
            await worker.run_forever(interval_seconds=args.interval)
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
