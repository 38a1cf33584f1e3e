import yaml
from pathlib import Path
import os
import logging

DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent / 'settings.yaml'

# Sections the generator and the entitlement gate read; missing keys fall back to these.
SECTION_DEFAULTS = {
    'generation': {'default_targets': [], 'syntax_check': True},
    'entitlement': {'cookie_name': 'SQLGen_Pro', 'cookie_value': '1'},
}


def _apply_section_defaults(config_data):
    for section, defaults in SECTION_DEFAULTS.items():
        values = config_data.get(section) or {}
        if not isinstance(values, dict):
            raise ValueError(f"'{section}' in settings.yaml must be a mapping")
        config_data[section] = {**defaults, **values}

    targets = config_data['generation']['default_targets'] or []
    if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
        raise ValueError("generation.default_targets must be a list of dialect names")
    config_data['generation']['default_targets'] = targets
    config_data['entitlement']['cookie_value'] = str(config_data['entitlement']['cookie_value'])


def load_config(settings_path=None):
    """Load settings.yaml (or the file named by ``SQLGEN_SETTINGS``).

    Relative ``base_dirs`` entries are resolved against the project root and
    the ``generation`` / ``entitlement`` sections are completed with defaults.
    """
    try:
        project_root = Path(__file__).parent.parent.parent

        if settings_path is None:
            settings_path = Path(os.getenv('SQLGEN_SETTINGS', DEFAULT_SETTINGS_PATH))
        settings_path = Path(settings_path)

        if not settings_path.exists():
            raise FileNotFoundError(f"settings.yaml not found at {settings_path}")

        with open(settings_path, encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        base_dirs = config_data.get('base_dirs') or {}
        config_data['base_dirs'] = {
            key: str((project_root / path).resolve())
            if isinstance(path, str) and not os.path.isabs(path) else path
            for key, path in base_dirs.items()
        }

        _apply_section_defaults(config_data)
        return config_data

    except FileNotFoundError as fnfe:
        logging.error(f"Configuration Error: {fnfe}", exc_info=True)
        raise
    except (yaml.YAMLError, ValueError) as e:
        logging.error(f"Invalid settings in {settings_path}: {e}", exc_info=True)
        raise Exception(f"Failed to load application configuration: {e}") from e

# Load config at import time
try:
    config = load_config()
except Exception as e:
    logging.critical(f"CRITICAL FAILURE: Could not load application settings. Error: {e}", exc_info=True)
    raise SystemExit(f"Application cannot start due to configuration load failure: {e}")
