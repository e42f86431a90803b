"""
Configuration Loader

Loads YAML configuration files for runtime settings, known companies,
certification authority patterns, the bundled known-name list and the
built-in sample catalog.
"""

import os
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

# Environment variables that override settings.yaml entries
_ENV_OVERRIDES = {
    'source_url': 'KOSHER_SOURCE_URL',
    'known_list_url': 'KOSHER_LIST_URL',
    'ocr_api_url': 'KOSHER_OCR_API_URL',
}


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'settings.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_settings(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Load runtime settings, applying environment overrides.

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings dictionary

    Example:
        {
            'source_url': 'https://www.kosharot.co.il/index2.php?id=281&lang=HEB',
            'source_origin': 'https://www.kosharot.co.il',
            'known_list_url': 'https://example.com/kosher-list.json',
            'refresh_interval_hours': 24,
            ...
        }
    """
    if environ is None:
        environ = os.environ

    settings = dict(load_config('settings.yaml').get('settings', {}))
    for key, env_name in _ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            settings[key] = value
    return settings


def get_refresh_interval(settings: Optional[Dict[str, Any]] = None) -> timedelta:
    """
    Cool-down between known-name list downloads.

    Args:
        settings: Settings dictionary (if None, loads from config)

    Returns:
        refresh_interval_hours as a timedelta (24 hours when unset)
    """
    if settings is None:
        settings = load_settings()
    return timedelta(hours=float(settings.get('refresh_interval_hours') or 24))


def get_request_timeout(settings: Optional[Dict[str, Any]] = None) -> float:
    """
    HTTP timeout in seconds for catalog and list downloads.

    Args:
        settings: Settings dictionary (if None, loads from config)

    Returns:
        request_timeout (30 when unset)
    """
    if settings is None:
        settings = load_settings()
    return float(settings.get('request_timeout') or 30)


def load_known_companies() -> List[str]:
    """
    Load known company/brand names for title matching.

    Returns:
        List of company names (canonical spelling)

    Example:
        ['תנובה', 'שטראוס', 'עלית', 'Osem', ...]
    """
    config = load_config('known_companies.yaml')
    return list(config.get('companies', []))


def load_certification_patterns() -> List[Dict[str, Any]]:
    """
    Load certification authority patterns.

    Returns:
        Ordered list of {'label': str, 'fragments': [str, ...]} entries

    Example:
        [
            {'label': 'חתם סופר', 'fragments': ['חתם סופר', 'chatam', 'hatam']},
            {'label': 'KF', 'fragments': ['kf']},
            ...
        ]
    """
    config = load_config('certification_patterns.yaml')
    return list(config.get('patterns', []))


def load_known_certifications() -> List[str]:
    """
    Load the bundled known certification name list.

    Used when no downloaded list has been stored yet.

    Returns:
        Ordered list of certification names
    """
    config = load_config('known_certifications.yaml')
    return list(config.get('certifications', []))


def load_sample_catalog() -> List[Dict[str, Any]]:
    """
    Load the built-in sample catalog entries.

    Returns:
        List of record dictionaries
    """
    config = load_config('sample_catalog.yaml')
    return list(config.get('records', []))


def get_companies_lowercase_map(companies: Optional[List[str]] = None) -> Dict[str, str]:
    """
    Get mapping from lowercase company name to canonical form.

    Args:
        companies: Company names (if None, loads from config)

    Returns:
        Dictionary mapping lowercase company to canonical form

    Example:
        {
            'osem': 'Osem',
            'תנובה': 'תנובה',
            ...
        }
    """
    if companies is None:
        companies = load_known_companies()

    return {company.lower(): company for company in companies}
