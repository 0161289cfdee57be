import re
from dataclasses import dataclass, field, replace

DEFAULT_WORD_LIMIT = 55
DEFAULT_SUFFIX = '&hellip;'
DEFAULT_SHORTCODE_PREFIXES = ('vc_', 'et')

_TAG_NAME_RE = re.compile(r'[A-Za-z][A-Za-z0-9:-]*')


def parse_allowed_tags(tags):
    """
    Normalise an allowed-tag list to a lower-case frozenset of tag names.
    Accepts '<a><strong>', 'a, strong' or any iterable of names.
    """
    if not tags:
        return frozenset()
    if isinstance(tags, str):
        return frozenset(name.lower() for name in _TAG_NAME_RE.findall(tags))
    names = set()
    for tag in tags:
        names.update(name.lower() for name in _TAG_NAME_RE.findall(str(tag)))
    return frozenset(names)


@dataclass(frozen=True)
class ExcerptConfig:
    word_limit: int = DEFAULT_WORD_LIMIT
    allowed_tags: frozenset = field(default_factory=lambda: frozenset({'a'}))
    finish_sentence: bool = False
    suffix: str = DEFAULT_SUFFIX
    shortcode_prefixes: tuple = DEFAULT_SHORTCODE_PREFIXES

    def __post_init__(self):
        if self.word_limit < 0:
            raise ValueError(f'word_limit must be >= 0, got {self.word_limit}')
        object.__setattr__(self, 'allowed_tags', parse_allowed_tags(self.allowed_tags))
        object.__setattr__(self, 'shortcode_prefixes', tuple(self.shortcode_prefixes or ()))

    @classmethod
    def from_object(cls, config_class):
        """Build from a Config-style class (EXCERPT_* attributes)."""
        return cls(
            word_limit=int(getattr(config_class, 'EXCERPT_WORD_LIMIT', DEFAULT_WORD_LIMIT)),
            allowed_tags=getattr(config_class, 'EXCERPT_ALLOWED_TAGS', '<a>'),
            finish_sentence=bool(getattr(config_class, 'EXCERPT_FINISH_SENTENCE', False)),
            suffix=getattr(config_class, 'EXCERPT_SUFFIX', DEFAULT_SUFFIX),
            shortcode_prefixes=getattr(config_class, 'SHORTCODE_STRIP_PREFIXES', DEFAULT_SHORTCODE_PREFIXES),
        )

    def with_word_limit(self, word_limit):
        return replace(self, word_limit=word_limit)

    def with_allowed_tags(self, tags):
        return replace(self, allowed_tags=parse_allowed_tags(tags))

    def allowed_tags_string(self):
        """Allowed tags in the '<a><strong>' form."""
        return ''.join(f'<{name}>' for name in sorted(self.allowed_tags))
