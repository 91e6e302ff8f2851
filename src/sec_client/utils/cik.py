"""Central Index Key helpers.

The SEC keys every company by a CIK that appears 10-digit, zero-padded in
URLs and JSON (``0000320193``) but is often written without the padding or
with separators (``320193``, ``320193-``). Malformed keys are rejected here,
before any request budget is spent on them.
"""

from sec_client.errors import InvalidCikError

CIK_LENGTH = 10


def format_cik(cik) -> str:
    """Normalise a CIK to 10 digits with leading zeros.

    Non-digit characters are dropped first. Raises ``InvalidCikError`` if no
    digit is left or more than 10 remain.
    """
    digits = "".join(c for c in str(cik) if c in "0123456789")

    if not digits:
        raise InvalidCikError(cik, "CIK must contain at least one digit")
    if len(digits) > CIK_LENGTH:
        raise InvalidCikError(cik, f"CIK cannot be longer than {CIK_LENGTH} digits")

    return digits.zfill(CIK_LENGTH)


def is_valid_cik(cik) -> bool:
    try:
        format_cik(cik)
    except InvalidCikError:
        return False
    return True
