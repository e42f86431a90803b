# Common utilities
from .config_loader import (
    get_refresh_interval,
    get_request_timeout,
    load_certification_patterns,
    load_config,
    load_known_certifications,
    load_known_companies,
    load_sample_catalog,
    load_settings,
)
from .log_config import setup_logging
from .text_utils import clean_text, normalize_for_match, split_keywords
