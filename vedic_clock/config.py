"""
Configuration loading: defaults, optional YAML file, environment overrides.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from loguru import logger

from .scrapers.browser_session import DESKTOP_USER_AGENT, UPSTREAM_URL

DEFAULT_CONFIG_PATH = Path('config') / 'clock_config.yaml'

DEFAULTS: Dict[str, Any] = {
    'server': {
        'host': '0.0.0.0',
        'port': 3000,
        'allow_origins': [],
    },
    'browser': {
        'url': UPSTREAM_URL,
        'headless': True,
        'args': ['--no-sandbox', '--disable-setuid-sandbox'],
        'user_agent': DESKTOP_USER_AGENT,
        'wait_until': 'domcontentloaded',
        'timeout': 60,  # seconds
    },
    'cache': {
        'min_refresh_ms': 5_000,
        'full_refresh_ms': 300_000,
    },
    'logging': {
        'level': 'INFO',
        'file': None,
        'rotation': '10 MB',
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if value is None and isinstance(merged.get(key), dict):
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def parse_origins(raw: Optional[str]) -> List[str]:
    """Split a comma-separated origin list, dropping blanks."""
    if not raw:
        return []
    return [origin.strip() for origin in raw.split(',') if origin.strip()]


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration.

    Args:
        path: YAML file to read. Defaults to $VEDIC_CLOCK_CONFIG or
            config/clock_config.yaml; a missing file is not an error.

    Returns:
        Configuration dictionary with server, browser, cache and logging sections
    """
    if path is None:
        path = Path(os.getenv('VEDIC_CLOCK_CONFIG', str(DEFAULT_CONFIG_PATH)))

    file_config: Dict[str, Any] = {}
    if path.exists():
        with open(path, 'r') as f:
            file_config = yaml.safe_load(f) or {}
        logger.debug(f"Loaded configuration from {path}")

    config = _merge(DEFAULTS, file_config)

    server = config['server']
    server['host'] = os.getenv('HOST', server['host'])
    server['port'] = int(os.getenv('PORT', server['port']))
    if 'ALLOW_ORIGINS' in os.environ:
        server['allow_origins'] = parse_origins(os.environ['ALLOW_ORIGINS'])
    elif isinstance(server['allow_origins'], str):
        server['allow_origins'] = parse_origins(server['allow_origins'])

    log_config = config['logging']
    log_config['level'] = os.getenv('LOG_LEVEL', log_config['level'])
    log_config['file'] = os.getenv('LOG_FILE', log_config['file'])

    return config
