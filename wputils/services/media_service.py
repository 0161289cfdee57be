import logging
import posixpath
from html import escape
from urllib.parse import urlparse
from bs4 import BeautifulSoup
from config import Config
from wputils.models.post import check_post_id

logger = logging.getLogger(__name__)


class MediaService:
    def __init__(self, placeholder_url=None, image_sizes=None):
        self.placeholder_url = placeholder_url or Config.PLACEHOLDER_IMAGE_URL
        self.image_sizes = dict(image_sizes if image_sizes is not None else Config.IMAGE_SIZES)

    def first_image_url(self, content):
        """src of the first <img> in content, or None."""
        if not content:
            return None
        try:
            soup = BeautifulSoup(content, 'lxml')
            img = soup.find('img', src=True)
        except Exception as e:
            logger.debug(f"Image lookup failed: {e}")
            return None
        if img is None or not img['src'].strip():
            return None
        return img['src'].strip()

    def catch_image(self, content, post_id, css_class='', return_url=False):
        """
        First image in the post content, or the placeholder image for the post.
        Returns the URL when return_url is set, otherwise an <img> tag.
        """
        post_id = check_post_id(post_id)
        if not post_id:
            return ''

        image = self.first_image_url(content)
        if not image:
            image = self.placeholder_url.format(post_id=post_id)

        if return_url:
            return image

        alt = posixpath.basename(urlparse(image).path)
        return (
            f"<img src='{escape(image, quote=True)}' alt='{escape(alt, quote=True)}' "
            f"class='{escape(css_class, quote=True)}' />"
        )

    def get_post_featured(self, post, size='full', return_url=False):
        """The post thumbnail for `size` when set, otherwise the first image in its content."""
        if post.has_thumbnail(size):
            url = post.thumbnails[size]
            if return_url:
                return url
            return (
                f'<img src="{escape(url, quote=True)}" '
                f'class="attachment-{size} size-{size} wp-post-image" alt="" />'
            )
        return self.catch_image(post.content, post.id, 'post-featured-image', return_url)

    def css_background_image_from_post(self, post, size='full'):
        return css_background_image(post.thumbnails.get(size, ''))

    def image_size_exists(self, size):
        return size in self.image_sizes


def css_background_image(url):
    """Value for a style attribute that sets `url` as background image."""
    return f'background-image:url({url or ""});'
