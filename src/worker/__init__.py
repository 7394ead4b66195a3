"""Background workers for the marketplace access service"""
from .ledger_auditor import LedgerAuditorWorker

__all__ = ["LedgerAuditorWorker"]
