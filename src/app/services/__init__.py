from .unit_of_work import UnitOfWork
from .owner_locks import OwnerLocks

__all__ = [
    "UnitOfWork",
    "OwnerLocks",
]
