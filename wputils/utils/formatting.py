import re
import unicodedata
from datetime import datetime, timezone
from urllib.parse import urlparse

MINUTE_IN_SECONDS = 60
HOUR_IN_SECONDS = 60 * MINUTE_IN_SECONDS
DAY_IN_SECONDS = 24 * HOUR_IN_SECONDS
WEEK_IN_SECONDS = 7 * DAY_IN_SECONDS
MONTH_IN_SECONDS = 30 * DAY_IN_SECONDS
YEAR_IN_SECONDS = 365 * DAY_IN_SECONDS

BYTE_UNITS = ['B', 'KB', 'MB', 'GB', 'TB', 'PB']


def encode_email(email):
    """Encode every character as a decimal HTML entity to keep the address away from scrapers."""
    return ''.join(f'&#{ord(ch)};' for ch in email or '')


def prepend0(num):
    return '%02d' % int(num)


def _plural(n, singular, plural):
    return f'{n} {singular if n == 1 else plural}'


def human_time_diff(start, end):
    """Rough distance between two datetimes: '5 mins', '2 hours', '3 weeks', '1 year'."""
    diff = abs((end - start).total_seconds())

    if diff < HOUR_IN_SECONDS:
        return _plural(max(round(diff / MINUTE_IN_SECONDS), 1), 'min', 'mins')
    if diff < DAY_IN_SECONDS:
        return _plural(max(round(diff / HOUR_IN_SECONDS), 1), 'hour', 'hours')
    if diff < WEEK_IN_SECONDS:
        return _plural(max(round(diff / DAY_IN_SECONDS), 1), 'day', 'days')
    if diff < MONTH_IN_SECONDS:
        return _plural(max(round(diff / WEEK_IN_SECONDS), 1), 'week', 'weeks')
    if diff < YEAR_IN_SECONDS:
        return _plural(max(round(diff / MONTH_IN_SECONDS), 1), 'month', 'months')
    return _plural(max(round(diff / YEAR_IN_SECONDS), 1), 'year', 'years')


def time_ago(post_date, now=None, label='ago'):
    """'3 hours ago' style string for a datetime or ISO date string."""
    if isinstance(post_date, str):
        post_date = datetime.fromisoformat(post_date)
    if post_date.tzinfo is None:
        post_date = post_date.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return f'{human_time_diff(post_date, now)} {label}'.strip()


def bytes_to_human(num_bytes):
    size = float(num_bytes)
    unit = 0
    while size > 1024 and unit < len(BYTE_UNITS) - 1:
        size /= 1024
        unit += 1
    return f'{round(size, 2):g} {BYTE_UNITS[unit]}'


def is_url_external(url, host):
    """True when url points somewhere other than `host`, or when no host is known."""
    if not host:
        return True
    return urlparse(url or '').hostname != host.lower()


def slugify(value):
    """Lowercase ASCII slug: 'Hello, World!' -> 'hello-world'."""
    value = unicodedata.normalize('NFKD', value or '').encode('ascii', 'ignore').decode('ascii')
    value = re.sub(r'[^a-z0-9]+', '-', value.lower())
    return value.strip('-')
