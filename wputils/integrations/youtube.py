import logging
import random
import feedparser
import requests
from config import Config
from wputils import feature_flags
from wputils.utils.formatting import slugify
from wputils.utils.text import clean_text

logger = logging.getLogger(__name__)

USER_AGENT = 'wputils/1.0'
MAXRES_THUMBNAIL_URL = 'https://i{server}.ytimg.com/vi/{video_id}/maxresdefault.jpg'
UTM_PARAMS = '&utm_source=blog&utm_medium=youtube&utm_campaign={campaign}'


def fetch_videos(channel_id, limit=3, timeout=None):
    """
    Fetch the latest videos of a YouTube channel from its public feed.
    Returns a list of dicts with: ID, link, title, description, thumbnail, channelURL.
    None when the channel id is empty or the feed cannot be fetched or parsed.
    """
    if not channel_id:
        return None

    url = Config.YOUTUBE_FEED_URL.format(channel_id=channel_id)
    timeout = timeout or Config.REQUEST_TIMEOUT
    try:
        resp = requests.get(url, timeout=timeout, headers={'User-Agent': USER_AGENT})
        resp.raise_for_status()
    except Exception as e:
        logger.warning(f"Failed to fetch YouTube feed {url}: {e}")
        return None

    feed = feedparser.parse(resp.content)
    if feed.bozo and not feed.entries:
        logger.warning(f"Malformed YouTube feed {url}: {feed.bozo_exception}")
        return None

    author = feed.feed.get('author_detail') or {}
    channel_url = f"{author.get('href', '')}?sub_confirmation=1"

    videos = []
    for entry in feed.entries[:max(limit, 0)]:
        video_id = entry.get('yt_videoid', '')
        title = entry.get('title', '')
        thumbnails = entry.get('media_thumbnail') or []
        feed_thumbnail = thumbnails[0].get('url', '') if thumbnails else ''

        thumbnail = feed_thumbnail
        if feature_flags.is_enabled('youtube_maxres_thumbnails') and video_id:
            thumbnail = _maxres_thumbnail(video_id, feed_thumbnail, timeout)

        videos.append({
            'ID': video_id,
            'link': entry.get('link', '') + UTM_PARAMS.format(campaign=slugify(title)),
            'title': title,
            'description': clean_text(entry.get('summary', '')),
            'thumbnail': thumbnail,
            'channelURL': channel_url,
        })

    logger.info(f"Fetched {len(videos)} videos for channel {channel_id}")
    return videos


def _maxres_thumbnail(video_id, fallback, timeout):
    """Max resolution thumbnail from a random image server, or `fallback` when it is missing."""
    url = MAXRES_THUMBNAIL_URL.format(server=random.randint(1, 4), video_id=video_id)
    try:
        resp = requests.head(url, timeout=timeout, allow_redirects=True)
    except requests.RequestException as e:
        logger.debug(f"Thumbnail probe failed for {video_id}: {e}")
        return fallback

    if resp.status_code == 404:
        return fallback
    return url
