# Module for loading and validating configuration
import json
import logging
import constants # Import constants

OPTIONAL_DEFAULTS = {
    'user_agent': constants.DEFAULT_USER_AGENT,
    'request_timeout_seconds': constants.DEFAULT_REQUEST_TIMEOUT,
    'max_workers': constants.DEFAULT_MAX_WORKERS,
    'chunk_size': constants.DEFAULT_CHUNK_SIZE,
    'log_file': constants.DEFAULT_LOG_FILE,
    'log_level': constants.DEFAULT_LOG_LEVEL,
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def default_config():
    """Returns a fresh config dictionary holding only the defaults."""
    return dict(OPTIONAL_DEFAULTS)


def load_config(config_path=None):
    """
    Loads configuration from an optional JSON file, validates, and sets defaults.

    With no path the defaults are returned. An explicit path that does not
    exist raises FileNotFoundError; malformed JSON or invalid values raise
    ValueError.
    """
    if config_path is None:
        return default_config()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Error decoding JSON from config file '{config_path}': {e}") from e

    if not isinstance(loaded, dict):
        raise ValueError(f"Config file '{config_path}' must contain a JSON object.")

    unknown_keys = sorted(key for key in loaded if key not in OPTIONAL_DEFAULTS)
    if unknown_keys:
        logging.warning(f"Ignoring unknown config keys in '{config_path}': {', '.join(unknown_keys)}")

    config = default_config()
    config.update({key: value for key, value in loaded.items() if key in OPTIONAL_DEFAULTS})

    # --- Validation ---
    timeout = config['request_timeout_seconds']
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
        raise ValueError("Config 'request_timeout_seconds' must be a positive number or null.")
    max_workers = config['max_workers']
    if max_workers is not None and (isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers < 1):
        raise ValueError("Config 'max_workers' must be a positive integer or null.")
    chunk_size = config['chunk_size']
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size < 1:
        raise ValueError("Config 'chunk_size' must be a positive integer.")
    if config['user_agent'] is not None and not isinstance(config['user_agent'], str):
        raise ValueError("Config 'user_agent' must be a string or null.")
    if config['log_file'] is not None and not isinstance(config['log_file'], str):
        raise ValueError("Config 'log_file' must be a string or null.")
    if not isinstance(config['log_level'], str) or config['log_level'].upper() not in LOG_LEVELS:
        raise ValueError(f"Config 'log_level' must be one of: {', '.join(LOG_LEVELS)}.")
    config['log_level'] = config['log_level'].upper()

    return config
