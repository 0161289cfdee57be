import re

# One HTML tag, or one run of non-tag non-whitespace characters, plus trailing whitespace
TOKEN_RE = re.compile(r'(<[^>]+>|[^<>\s]+)\s*')
SENTENCE_END_RE = re.compile(r'[?.!]\s*$')

CAPTION_OR_IMG_RE = re.compile(r'\[caption .+?\[/caption\]|<\s*img\b[^>]*>', re.IGNORECASE | re.DOTALL)

# [[name]] is an escaped shortcode and is kept as the literal [name]
SHORTCODE_RE = re.compile(r'\[(\[?)/?[A-Za-z][\w-]*(?:\s[^\[\]]*?)?/?\](\]?)')

COMMENT_RE = re.compile(r'<!--.*?-->', re.DOTALL)
ANY_TAG_RE = re.compile(r'<\s*(/?)\s*([A-Za-z][A-Za-z0-9:-]*)?([^>]*)>')
TAG_RE = re.compile(r'<(/?)([A-Za-z][A-Za-z0-9:-]*)([^>]*)>')

VOID_TAGS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
})

# Tags that may be opened again directly inside themselves
NESTABLE_TAGS = frozenset({
    'article', 'aside', 'blockquote', 'details', 'div', 'figure',
    'object', 'q', 'section', 'span',
})


def tokenize(text):
    """Split text into tag tokens and word tokens, each keeping its trailing whitespace."""
    return [m.group(0) for m in TOKEN_RE.finditer(text or '')]


def is_tag(token):
    return token.startswith('<')


def ends_sentence(token):
    return SENTENCE_END_RE.search(token) is not None


def strip_captions_and_images(html):
    """Remove [caption]...[/caption] blocks and <img> tags."""
    return CAPTION_OR_IMG_RE.sub('', html or '')


def strip_prefixed_shortcodes(html, prefixes):
    """Remove opening and closing shortcode tags whose name starts with one of `prefixes`."""
    if not html or not prefixes:
        return html or ''
    alternatives = '|'.join(re.escape(p) for p in prefixes)
    return re.sub(rf'\[/?(?:{alternatives})[^\]]*\]', '', html)


def _shortcode_replacement(match):
    if match.group(1) and match.group(2):
        return match.group(0)[1:-1]
    return match.group(1) + match.group(2)


def strip_shortcodes(html):
    """Remove every [name ...] and [/name] shortcode tag, keeping enclosed text."""
    return SHORTCODE_RE.sub(_shortcode_replacement, html or '')


def strip_tags(html, allowed_tags=()):
    """
    Remove HTML comments and every tag not named in `allowed_tags`.
    Kept tags lose any whitespace after '<' or '</' and are otherwise untouched.
    """
    allowed = {t.lower() for t in allowed_tags}
    html = COMMENT_RE.sub('', html or '')

    def _keep_allowed(match):
        closing, name, rest = match.groups()
        if name and name.lower() in allowed:
            return f'<{closing}{name}{rest}>'
        return ''

    return ANY_TAG_RE.sub(_keep_allowed, html)


def balance_tags(html):
    """
    Repair nesting so every opened tag is closed in order.
    Closing a tag that is not innermost closes the tags opened inside it first;
    closing tags with no matching opener are dropped; tags left open are closed at the end.
    Reopening a non-nestable tag such as <a> or <p> closes the open one first.
    """
    if not html:
        return ''

    out = []
    stack = []
    pos = 0
    for match in TAG_RE.finditer(html):
        out.append(html[pos:match.start()])
        pos = match.end()
        closing, name, attrs = match.group(1), match.group(2).lower(), match.group(3)

        if closing:
            if name not in stack:
                continue
            while stack:
                open_name = stack.pop()
                if open_name == name:
                    break
                out.append(f'</{open_name}>')
            out.append(match.group(0))
            continue

        if stack and stack[-1] == name and name not in NESTABLE_TAGS:
            out.append(f'</{stack.pop()}>')
        out.append(match.group(0))
        if name not in VOID_TAGS and not attrs.rstrip().endswith('/'):
            stack.append(name)

    out.append(html[pos:])
    out.extend(f'</{name}>' for name in reversed(stack))
    return ''.join(out)
