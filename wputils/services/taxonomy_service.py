import logging
from wputils.models.post import check_post_id

logger = logging.getLogger(__name__)

# Permalink base per taxonomy; anything else uses its own name
TAXONOMY_BASES = {
    'category': 'category',
    'post_tag': 'tag',
}

LOOKUP_FIELDS = ('slug', 'name', 'id', 'ID', 'term_id', 'term_taxonomy_id')


class TaxonomyService:
    def __init__(self, terms, site_url=''):
        self.terms = list(terms)
        self.site_url = (site_url or '').rstrip('/')
        self._by_id = {t.id: t for t in self.terms}

    def get_term(self, term_id):
        return self._by_id.get(term_id)

    def get_term_by(self, field, value, taxonomy=''):
        """Find a term by slug, name, id or term_taxonomy_id, optionally within one taxonomy."""
        if field not in LOOKUP_FIELDS:
            raise ValueError(f"Unknown term lookup field '{field}', expected one of {LOOKUP_FIELDS}")

        for term in self.terms:
            if taxonomy and term.taxonomy != taxonomy:
                continue
            if field == 'slug' and term.slug == value:
                return term
            if field == 'name' and term.name == value:
                return term
            if field in ('id', 'ID', 'term_id') and term.id == _as_int(value):
                return term
            if field == 'term_taxonomy_id' and term.term_taxonomy_id == _as_int(value):
                return term
        return None

    def term_link(self, term):
        base = TAXONOMY_BASES.get(term.taxonomy, term.taxonomy)
        return f'{self.site_url}/{base}/{term.slug}/'

    def get_descendants(self, term_id, _seen=None):
        """All terms below term_id, depth first."""
        seen = _seen if _seen is not None else {term_id}
        result = []
        for child in self.get_children(term_id):
            if child.id in seen:
                continue
            seen.add(child.id)
            result.append(child)
            result.extend(self.get_descendants(child.id, seen))
        return result

    def get_taxonomy(self, field, value, taxonomy=''):
        """
        Term as a dict with its link, whether it is top level, and all of its
        descendants (each flagged is_parent=False). None when the term is missing.
        """
        term = self.get_term_by(field, value, taxonomy)
        if term is None:
            logger.debug(f"No term with {field}={value!r} in taxonomy {taxonomy!r}")
            return None

        data = term.to_dict()
        data['is_parent'] = term.is_top_level
        data['link'] = self.term_link(term)
        data['children'] = []
        for child in self.get_descendants(term.id):
            child_data = child.to_dict()
            child_data['is_parent'] = False
            child_data['link'] = self.term_link(child)
            data['children'].append(child_data)
        return data

    def get_primary_term(self, post, taxonomy='category'):
        """
        First term of `taxonomy` assigned to the post, overridden by the post's
        primary term for that taxonomy when one is set and exists.
        """
        if not check_post_id(post.id):
            return None
        if taxonomy not in post.terms:
            return None

        terms = [self._by_id[tid] for tid in post.terms[taxonomy] if tid in self._by_id]
        if not terms:
            return {}

        term = terms[0]
        primary_id = post.primary_terms.get(taxonomy)
        if primary_id and primary_id in self._by_id:
            term = self._by_id[primary_id]

        return {
            'ID': term.id,
            'title': term.name,
            'slug': term.slug,
            'url': self.term_link(term),
        }

    def get_parent(self, term_id):
        """The term itself when top level, otherwise its parent."""
        term = self.get_term(term_id)
        if term is None:
            return None
        if term.is_top_level:
            return term
        return self.get_term(term.parent)

    def get_children(self, parent_id):
        return [t for t in self.terms if t.parent == parent_id and t.id != parent_id]

    def is_parent(self, term_id):
        term = self.get_term(term_id)
        if term is None:
            return False
        return term.is_top_level


def _as_int(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
