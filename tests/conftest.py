import os
import pytest
from datetime import datetime, timezone

# Set test env vars before importing the package
os.environ['FF_YOUTUBE_MAXRES_THUMBNAILS'] = 'false'

from wputils import configure, feature_flags
from wputils.models.excerpt import ExcerptConfig
from wputils.models.post import Post
from wputils.models.term import Term
from config import TestConfig

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), 'fixtures')


@pytest.fixture(scope='session')
def excerpt_config():
    """Excerpt settings built from the test config."""
    return configure(TestConfig)


@pytest.fixture
def plain_config():
    """Excerpt settings that allow no tags at all."""
    return ExcerptConfig(word_limit=5, allowed_tags=())


@pytest.fixture(autouse=True)
def reset_feature_flags():
    feature_flags.init_flags()
    yield
    feature_flags.init_flags()


@pytest.fixture
def sample_terms():
    """Small category tree plus one tag."""
    return [
        Term(id=1, name='Fashion', slug='fashion'),
        Term(id=2, name='Street Style', slug='street-style', parent=1),
        Term(id=3, name='Shoes', slug='shoes', parent=2),
        Term(id=4, name='Travel', slug='travel'),
        Term(id=5, name='Spring', slug='spring', taxonomy='post_tag'),
        Term(id=6, name='Europe', slug='europe', taxonomy='destination', parent=0),
    ]


@pytest.fixture
def sample_posts():
    """One blog post and a small page tree."""
    return [
        Post(
            id=10,
            title='Spring Lookbook',
            content='<p>Spring is <b>here</b>.</p>',
            slug='spring-lookbook',
            date=datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
            terms={'category': [2, 4], 'post_tag': [5]},
        ),
        Post(id=20, title='About', slug='about', post_type='page'),
        Post(id=21, title='Team', slug='team', post_type='page', parent_id=20, menu_order=2),
        Post(id=22, title='History', slug='history', post_type='page', parent_id=20, menu_order=1),
        Post(id=23, title='Founders', slug='founders', post_type='page', parent_id=21),
        Post(id=24, title='Careers', slug='careers', post_type='page', parent_id=20, status='draft'),
        Post(id=30, title='Contact', slug='contact', post_type='page', parent_id=0),
    ]


@pytest.fixture
def sample_post_html():
    """Load sample post content."""
    with open(os.path.join(FIXTURES_DIR, 'sample_post.html')) as f:
        return f.read()


@pytest.fixture
def youtube_feed_xml():
    """Load sample YouTube channel feed."""
    with open(os.path.join(FIXTURES_DIR, 'youtube_feed.xml'), 'rb') as f:
        return f.read()
