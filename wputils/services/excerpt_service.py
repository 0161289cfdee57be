import logging
from wputils.models.excerpt import ExcerptConfig
from wputils.utils.markup import (
    balance_tags,
    ends_sentence,
    is_tag,
    strip_captions_and_images,
    strip_prefixed_shortcodes,
    strip_shortcodes,
    strip_tags,
    tokenize,
)
from wputils.utils.text import word_count

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = ExcerptConfig()


def excerpt(text, config=None, finish_sentence=None, suffix=None):
    """
    Cut marked-up text down to config.word_limit words.

    Tags are kept in place and never count as words. With finish_sentence the
    cut moves forward to the first word ending in '.', '!' or '?' at or after
    the limit. The result has shortcodes, images and non-allowed tags removed
    and its markup balanced. `suffix` is appended when words were dropped or
    the cleaned result still has more words than the limit.
    """
    config = config or DEFAULT_CONFIG
    if finish_sentence is None:
        finish_sentence = config.finish_sentence
    if suffix is None:
        suffix = config.suffix

    out, words_dropped = _truncate(tokenize(text), config.word_limit, finish_sentence)
    out = clean_excerpt_markup(out, config)

    # Re-measured after cleaning, so may differ from the count used for the cut
    over_limit = word_count(out) > config.word_limit
    if out and (words_dropped or over_limit):
        out += suffix

    return out


def post_excerpt(post, config=None):
    """Hand-written excerpt when the post has one, otherwise one generated from its content."""
    if post.has_excerpt():
        return post.excerpt
    return excerpt(post.content, config)


def clean_excerpt_markup(html, config=None):
    """Strip captions, images, shortcodes and non-allowed tags, then balance what is left."""
    config = config or DEFAULT_CONFIG
    html = strip_captions_and_images(html)
    html = strip_prefixed_shortcodes(html, config.shortcode_prefixes)
    html = strip_shortcodes(html)
    html = strip_tags(html, config.allowed_tags)
    html = balance_tags(html)
    return html.strip()


def _truncate(tokens, limit, finish_sentence):
    """Join tokens up to the word limit. Returns (text, whether any word token was dropped)."""
    parts = []
    count = 0
    for index, token in enumerate(tokens):
        if count >= limit and not finish_sentence:
            dropped = any(not is_tag(t) for t in tokens[index:])
            logger.debug(f"Excerpt cut at {count} words, {len(tokens) - index} tokens dropped")
            return ''.join(parts), dropped

        if is_tag(token):
            parts.append(token)
            continue

        count += 1
        if finish_sentence and count >= limit and ends_sentence(token):
            parts.append(token.strip())
            logger.debug(f"Excerpt finished sentence at word {count} (limit {limit})")
            break
        parts.append(token)

    return ''.join(parts), False
