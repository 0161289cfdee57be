from wputils.models.excerpt import ExcerptConfig
from wputils.models.post import Post, check_post_id
from wputils.models.term import Term

__all__ = [
    'ExcerptConfig',
    'Post', 'check_post_id',
    'Term',
]
