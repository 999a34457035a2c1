from .demo import charge, handle, load_account, run_demo  # noqa: F401
from .store import NOT_FOUND, AccountStore, QuotaExceeded  # noqa: F401

__all__ = [
    "AccountStore",
    "NOT_FOUND",
    "QuotaExceeded",
    "charge",
    "handle",
    "load_account",
    "run_demo",
]
