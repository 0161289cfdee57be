from dataclasses import dataclass


@dataclass
class Term:
    id: int
    name: str
    slug: str
    taxonomy: str = 'category'
    parent: int = 0
    term_taxonomy_id: int = 0

    def __post_init__(self):
        if not self.term_taxonomy_id:
            self.term_taxonomy_id = self.id

    @property
    def is_top_level(self):
        return self.parent == 0

    def to_dict(self):
        return {
            'term_id': self.id,
            'name': self.name,
            'slug': self.slug,
            'taxonomy': self.taxonomy,
            'parent': self.parent,
            'term_taxonomy_id': self.term_taxonomy_id,
        }
