from urlshortener.utils.config import app_env, app_name, app_prefix, load_config, backend_config
from urlshortener.utils.helpers import get_short_url
from urlshortener.utils.shortener import generate_shortcode
from urlshortener.utils.logging import initialize_logging
from urlshortener.utils.runtime import running_locally


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'backend_config',
    'get_short_url',
    'initialize_logging',
    'running_locally',
]
