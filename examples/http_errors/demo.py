"""
HTTP handler example composing errors with status codes.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from errcompose import CompositeError, as_error, http_code, is_error, new, with_field, with_http_code

from .store import NOT_FOUND, AccountStore, QuotaExceeded, default_store


def load_account(store: AccountStore, account_id: str) -> Dict[str, object]:
    try:
        return store.fetch(account_id)
    except LookupError as exc:
        raise new(NOT_FOUND, exc, f"account {account_id}", with_http_code(404)) from exc


def charge(store: AccountStore, account_id: str, amount: int) -> int:
    account = load_account(store, account_id)
    try:
        return store.debit(account, amount)
    except QuotaExceeded as exc:
        raise new(
            "payment rejected",
            exc,
            with_http_code(402),
            with_field("min_amount", exc.limit),
        ) from exc


def handle(path: str, store: Optional[AccountStore] = None) -> Tuple[int, str]:
    """
    Route ``/charge/<account>/<amount>`` and translate errors into responses.
    """
    store = store or default_store()
    try:
        _, action, account_id, raw_amount = path.split("/")
        if action != "charge":
            raise new("unknown route", with_http_code(404))
        balance = charge(store, account_id, int(raw_amount))
    except CompositeError as exc:
        code = http_code(exc) or 500
        return code, format(exc, "v")
    except ValueError as exc:
        composed = new("malformed request", exc, with_http_code(400))
        return http_code(composed), format(composed, "v")
    return 200, f"balance {balance}"


def run_demo() -> List[str]:
    one = LookupError("one")
    two = KeyError("two")
    err = new(one, two, "three", with_http_code(500))
    wrapped = new(err, "wrapped error")

    lines = [
        f"one is: {is_error(err, one)}",
        f"two is: {is_error(err, two)}",
        f"short error: {err:s}",
        f"full error: {err:v}",
        f"wrapped short error: {wrapped}",
        f"wrapped full error: {wrapped:v}",
        f"wrapped is: {is_error(wrapped, err)}",
        f"wrapped code: {http_code(wrapped)}",
        f"key error found: {as_error(wrapped, KeyError) is two}",
    ]
    for path in ("/charge/alice/10", "/charge/bob/10", "/charge/alice/5000", "/refund/alice/1"):
        status, body = handle(path)
        lines.append(f"{path} -> {status} {body}")
    return lines


if __name__ == "__main__":  # pragma: no cover
    for line in run_demo():
        print(line)
