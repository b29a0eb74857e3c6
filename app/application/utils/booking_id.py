from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]")


def generate_booking_id(name: str, now_millis: int) -> str:
    """BK-<first 6 alphanumerics of name, upper-cased>-<last 6 digits of now_millis>.

    Same name within the same millisecond yields the same id.
    """
    name_part = _NON_ALNUM.sub("", name)[:6].upper()
    time_suffix = str(now_millis)[-6:]
    return f"BK-{name_part}-{time_suffix}"
