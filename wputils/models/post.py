from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional


def check_post_id(post_id):
    """Return post_id when it is a positive integer, otherwise 0."""
    if isinstance(post_id, bool) or not isinstance(post_id, int) or post_id <= 0:
        return 0
    return post_id


@dataclass
class Post:
    id: int
    title: str = ''
    content: str = ''
    excerpt: str = ''
    slug: str = ''
    post_type: str = 'post'
    status: str = 'publish'
    parent_id: int = 0
    menu_order: int = 0
    date: Optional[datetime] = None
    thumbnails: Dict[str, str] = field(default_factory=dict)
    terms: Dict[str, List[int]] = field(default_factory=dict)
    primary_terms: Dict[str, int] = field(default_factory=dict)

    def has_excerpt(self):
        return bool((self.excerpt or '').strip())

    def has_thumbnail(self, size='full'):
        return bool(self.thumbnails.get(size))
