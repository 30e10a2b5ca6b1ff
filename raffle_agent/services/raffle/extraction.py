"""Best-effort parameter extraction from free-form request text."""

import re
from datetime import datetime, timezone

ADDRESS_RE = re.compile(r'0x[a-fA-F0-9]{40}')
TICKET_COUNT_RE = re.compile(r'(\d+)\s*tickets?', re.IGNORECASE)
INTEGER_RE = re.compile(r'[+-]?\d+')
LEADING_INTEGER_RE = re.compile(r'\s*([+-]?\d+)(?![-:T\d])')

# Synonyms are regex fragments, tried in priority order
TITLE_KEYS = ['title']
DESCRIPTION_KEYS = ['description', 'desc']
ENTRY_FEE_KEYS = ['entry.?fee', 'fee', 'price', 'cost']
MAX_PARTICIPANTS_KEYS = ['max.?participants', 'max.?entries', 'slots', 'max']
PRIZE_DESCRIPTION_KEYS = ['prize.?description', 'prize']
COMMISSION_KEYS = ['commission', 'commission.?bps']
DEADLINE_KEYS = ['deadline', 'ends', 'end.?date', 'end.?time']

PARAM_VALUE_TEMPLATE = r'{key}[:\s]+["\']?([^"\',\n]+)["\']?'


def extract_param(text: str, keys: list[str]) -> str | None:
    """
    Find the value written after the first matching key.

    Keys are checked in order; the first key that matches anywhere in the
    text wins, even if a later key appears earlier in the text.

    Args:
        text: Free-form request text
        keys: Key synonyms (regex fragments) in priority order

    Returns:
        Stripped value or None if no key matches
    """
    for key in keys:
        match = re.search(PARAM_VALUE_TEMPLATE.format(key=key), text, re.IGNORECASE)
        if match:
            return match.group(1).strip()
    return None


def parse_deadline(value: str | None) -> int | None:
    """
    Convert a deadline string to unix seconds.

    An integer string is taken as a unix timestamp. Anything else is parsed
    as ISO-8601; dates without an offset are taken as UTC. Failing that, a
    leading integer followed by other text is taken as a unix timestamp.
    """
    if not value:
        return None
    value = value.strip()

    if INTEGER_RE.fullmatch(value):
        timestamp = int(value)
    else:
        try:
            moment = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            moment = None

        if moment is not None:
            if moment.tzinfo is None:
                moment = moment.replace(tzinfo=timezone.utc)
            timestamp = int(moment.timestamp())
        else:
            # "1750000000." or "1750000000 UTC": take the leading number
            match = LEADING_INTEGER_RE.match(value)
            if not match:
                return None
            timestamp = int(match.group(1))

    return timestamp if timestamp > 0 else None


def extract_deadline(text: str) -> int | None:
    return parse_deadline(extract_param(text, DEADLINE_KEYS))


def extract_address(text: str) -> str | None:
    """First 0x-prefixed 40-hex-digit address in the text."""
    match = ADDRESS_RE.search(text)
    return match.group(0) if match else None


def extract_ticket_count(text: str, default: int = 1) -> int:
    """Number written right before 'ticket(s)', or the default."""
    match = TICKET_COUNT_RE.search(text)
    if not match:
        return default
    count = int(match.group(1))
    return count if count >= 1 else default
