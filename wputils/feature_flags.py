import os

FLAG_PREFIX = 'FF_'

# Flags known to the library and their values when the environment is silent
DEFAULT_FLAGS = {
    'youtube_maxres_thumbnails': False,
}

_FLAGS = dict(DEFAULT_FLAGS)


def init_flags(environ=None):
    """Load FF_* variables from `environ` (defaults to os.environ) on top of the defaults."""
    environ = os.environ if environ is None else environ
    _FLAGS.clear()
    _FLAGS.update(DEFAULT_FLAGS)
    for key, val in environ.items():
        if key.startswith(FLAG_PREFIX):
            _FLAGS[key[len(FLAG_PREFIX):].lower()] = val.lower() in ('true', '1', 'yes', 'on')


def is_enabled(flag_name: str) -> bool:
    return _FLAGS.get(flag_name, False)


def set_flag(flag_name: str, value: bool):
    _FLAGS[flag_name] = bool(value)
