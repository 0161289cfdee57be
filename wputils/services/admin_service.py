import logging
import posixpath
from urllib.parse import urlparse
from config import Config

logger = logging.getLogger(__name__)


def _require_list(value, name):
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise TypeError(f'{name} must be a list, got {type(value).__name__}')


class AdminService:
    def __init__(self, version=None):
        self.version = version or Config.VERSION

    def hide_plugins(self, plugins, to_hide):
        """
        Plugin table rows without the given plugins.
        plugins: mapping of 'plugin_folder/plugin_file.php' -> plugin data
        """
        _require_list(to_hide, 'to_hide')
        hidden = set(to_hide)
        visible = {path: data for path, data in plugins.items() if path not in hidden}
        if len(visible) != len(plugins):
            logger.debug(f"Hid {len(plugins) - len(visible)} plugins from the plugin list")
        return visible

    def remove_widgets(self, registered, to_remove):
        """Registered widget class names minus those in to_remove, order kept."""
        _require_list(to_remove, 'to_remove')
        removed = set(to_remove)
        return [w for w in registered if w not in removed]

    def body_classes(self, classes, is_mobile=False, testing=None, permalink=None, is_singular=False):
        """
        Extra <body> classes: library markers, device type, testing markers and
        the permalink basename on single posts and pages.
        """
        classes = list(classes)
        custom = ['wputils', f'wputils-{self.version}']
        custom.append('is-mobile' if is_mobile else 'is-desktop')

        if testing:
            custom.append(f'testing-{testing}')
            custom.append('testing')

        if is_singular and permalink:
            basename = posixpath.basename(urlparse(permalink).path.rstrip('/'))
            if basename and basename not in classes:
                custom.append(basename)

        return classes + custom


def is_testing(query, testing=''):
    """
    The 'testing' query parameter, or True when it equals `testing`.
    query: mapping of query-string parameters
    """
    value = query.get('testing')
    if testing and value == testing:
        return True
    return value
