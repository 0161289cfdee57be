import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    VERSION = os.getenv('WPUTILS_VERSION', '1.0.0')

    # Excerpt
    EXCERPT_WORD_LIMIT = int(os.getenv('EXCERPT_WORD_LIMIT', '55'))
    EXCERPT_ALLOWED_TAGS = os.getenv('EXCERPT_ALLOWED_TAGS', '<a>')
    EXCERPT_FINISH_SENTENCE = os.getenv('EXCERPT_FINISH_SENTENCE', 'false').lower() == 'true'
    EXCERPT_SUFFIX = os.getenv('EXCERPT_SUFFIX', '&hellip;')
    SHORTCODE_STRIP_PREFIXES = tuple(
        p.strip() for p in os.getenv('SHORTCODE_STRIP_PREFIXES', 'vc_,et').split(',')
        if p.strip()
    )

    # Site
    SITE_URL = os.getenv('SITE_URL', '').rstrip('/')
    SERVER_NAME = os.getenv('SERVER_NAME', '')

    # Media
    PLACEHOLDER_IMAGE_URL = os.getenv(
        'PLACEHOLDER_IMAGE_URL', 'https://picsum.photos/1200/1200?random={post_id}'
    )
    IMAGE_SIZES = {
        'thumbnail': (150, 150, True),
        'medium': (300, 300, False),
        'medium_large': (768, 0, False),
        'large': (1024, 1024, False),
    }

    # YouTube
    YOUTUBE_FEED_URL = os.getenv(
        'YOUTUBE_FEED_URL', 'https://www.youtube.com/feeds/videos.xml?channel_id={channel_id}'
    )
    REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '10'))

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    EXCERPT_WORD_LIMIT = 55
    EXCERPT_ALLOWED_TAGS = '<a>'
    EXCERPT_FINISH_SENTENCE = False
    EXCERPT_SUFFIX = '&hellip;'
    SHORTCODE_STRIP_PREFIXES = ('vc_', 'et')
    SITE_URL = 'https://example.com'
    SERVER_NAME = 'example.com'
    REQUEST_TIMEOUT = 2
    LOG_LEVEL = 'DEBUG'
