"""
Configuration loading for the text generator.

Settings come from ``configs/markov_text_<environment>.yaml`` when it exists,
then ``configs/markov_text.yaml``, then the built-in ``DEFAULT_CONFIG``.
Values found in a file override the defaults key by key.
"""

import os
import logging

import yaml

# Project root is two levels up from models/markov_text
project_root = os.path.abspath(os.path.join(
    os.path.dirname(os.path.abspath(__file__)), "..", ".."))

DEFAULT_CONFIG_DIR = os.path.join(project_root, "configs")

DEFAULT_CONFIG = {
    "sequence_length": 200,
    "sample_size": 2,
    "source_file": None,
    "samples_dir": "samples",
    "log_file": None,
    "seed": None,
}

logger = logging.getLogger(__name__)


def _read_yaml(config_path):
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Error loading config from {config_path}: {e}")
        return None

    if not isinstance(config, dict):
        logger.warning(f"Ignoring config {config_path}: expected a mapping")
        return None

    return config


def load_config(environment="development", config_path=None, config_dir=None):
    """
    Load generator settings.

    Args:
        environment (str): Environment name used to pick ``markov_text_<env>.yaml``
        config_path (str, optional): Explicit config file; skips the lookup
        config_dir (str, optional): Directory to look in (default: ``configs/``)

    Returns:
        dict: Settings with every key of ``DEFAULT_CONFIG`` present
    """
    config = dict(DEFAULT_CONFIG)

    if config_path:
        candidates = [config_path]
    else:
        config_dir = config_dir or DEFAULT_CONFIG_DIR
        candidates = [
            os.path.join(config_dir, f"markov_text_{environment}.yaml"),
            os.path.join(config_dir, "markov_text.yaml"),
        ]

    for candidate in candidates:
        if not os.path.exists(candidate):
            continue

        loaded = _read_yaml(candidate)
        if loaded is not None:
            config.update(loaded)
            config["config_path"] = candidate
            logger.debug(f"Loaded config from {candidate}")
            return config

    logger.debug("No config file found, using defaults")
    return config


def resolve_samples_dir(config):
    """
    Return the absolute samples directory for a config.

    Relative paths are taken from the project root.
    """
    samples_dir = config.get("samples_dir") or DEFAULT_CONFIG["samples_dir"]
    if os.path.isabs(samples_dir):
        return samples_dir
    return os.path.join(project_root, samples_dir)
