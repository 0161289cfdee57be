import logging
from config import Config


def configure(config_class=None):
    """Set up logging and feature flags, and return the excerpt settings for `config_class`."""
    config_class = config_class or Config

    # Logging
    logging.basicConfig(
        level=getattr(logging, getattr(config_class, 'LOG_LEVEL', 'INFO')),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    # Feature flags
    from wputils import feature_flags
    feature_flags.init_flags()

    from wputils.models.excerpt import ExcerptConfig
    return ExcerptConfig.from_object(config_class)
