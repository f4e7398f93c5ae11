"""Configuration from environment variables and an optional .env file."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = "."
DEFAULT_MAX_TEXT_LENGTH = 100
DEFAULT_FASTMCP_PORT = 8978

CONFIG_KEYS = ['XML2HTML_OUTPUT_DIR', 'XML2HTML_INCLUDE_STYLES',
               'XML2HTML_MAX_TEXT_LENGTH', 'FASTMCP_PORT']


def load_config() -> dict:
    """Load config from environment variables and .env file.

    Environment variables take precedence over .env file values.
    """
    paths = [
        os.environ.get('XML2HTML_CONFIG'),
        Path.cwd() / '.env',
    ]
    config = {}
    for p in paths:
        if p and Path(p).exists():
            try:
                for line in Path(p).read_text().splitlines():
                    line = line.strip()
                    if line and not line.startswith('#') and '=' in line:
                        key, value = line.split('=', 1)
                        config[key.strip()] = value.strip()
                break
            except OSError as e:
                logger.warning(f"Could not read config file {p}: {e}")

    for key in CONFIG_KEYS:
        env_value = os.environ.get(key)
        if env_value is not None:
            config[key] = env_value

    return config


def get_output_dir() -> Path:
    return Path(load_config().get('XML2HTML_OUTPUT_DIR', DEFAULT_OUTPUT_DIR)).expanduser()


def get_include_styles() -> bool:
    value = load_config().get('XML2HTML_INCLUDE_STYLES', 'true')
    return value.strip().lower() not in ('false', '0', 'no', 'off')


def get_max_text_length() -> int:
    value = load_config().get('XML2HTML_MAX_TEXT_LENGTH')
    try:
        return int(value) if value else DEFAULT_MAX_TEXT_LENGTH
    except ValueError:
        logger.warning(f"Invalid XML2HTML_MAX_TEXT_LENGTH {value!r}, using {DEFAULT_MAX_TEXT_LENGTH}")
        return DEFAULT_MAX_TEXT_LENGTH


def get_fastmcp_port() -> int:
    return int(load_config().get('FASTMCP_PORT', DEFAULT_FASTMCP_PORT))
