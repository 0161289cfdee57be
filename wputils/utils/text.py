import re
from html import unescape


def strip_markup(html_or_text):
    """Replace HTML tags with spaces, leaving entities untouched."""
    return re.sub(r'<[^>]+>', ' ', html_or_text or '')


def clean_text(html_or_text):
    """Strip HTML tags, decode entities and normalize whitespace."""
    text = unescape(strip_markup(html_or_text))
    text = re.sub(r'\s+', ' ', text).strip()
    return text


def word_count(text):
    """Count whitespace-separated words in text, ignoring markup."""
    return len(strip_markup(text).split())
