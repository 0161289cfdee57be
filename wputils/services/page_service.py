from wputils.models.post import check_post_id


class PageService:
    def __init__(self, posts):
        self.posts = list(posts)
        self._by_id = {p.id: p for p in self.posts}

    def _pages(self, status):
        return [
            p for p in self.posts
            if p.post_type == 'page' and (status == 'any' or p.status == status)
        ]

    def get_descendants(self, parent_id, status='publish'):
        pages = self._pages(status)
        result = []
        queue = [parent_id]
        while queue:
            current = queue.pop(0)
            for page in pages:
                if page.parent_id == current and page.id != current and page not in result:
                    result.append(page)
                    queue.append(page.id)
        return result

    def has_children(self, parent_id, status='publish'):
        return bool(self.get_descendants(parent_id, status))

    def get_parent_id(self, post_id):
        """Parent id of the post, or 0 for top-level, unknown or invalid ids."""
        if not check_post_id(post_id):
            return 0
        post = self._by_id.get(post_id)
        if post is None:
            return 0
        return post.parent_id or 0

    def get_children(self, parent_id, status='publish'):
        """Direct child pages ordered by menu_order."""
        if parent_id <= 0 or not self.has_children(parent_id, status):
            return []
        children = [p for p in self._pages(status) if p.parent_id == parent_id]
        return sorted(children, key=lambda p: p.menu_order)
