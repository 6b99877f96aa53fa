"""Configuration management module."""

import os
from typing import Dict, Any, List
import yaml


DEFAULT_CONFIG_PATH = "config/embeddings.yaml"

REQUIRED_SECTIONS = ['embedding', 'ollama', 'logging']
VALID_POLICIES = ('strict', 'dynamic')
VALID_DTYPES = ('float32', 'float64')


class Config:
    """Configuration class for accessing YAML config values."""

    def __init__(self, config_dict: Dict[str, Any]):
        self._config = config_dict

    def __getattr__(self, name: str) -> Any:
        """Allow attribute-style access to config values."""
        if name.startswith('_'):
            raise AttributeError(name)
        value = self._config.get(name)
        if isinstance(value, dict):
            return Config(value)
        return value

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value with optional default."""
        return self._config.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config back to dictionary."""
        return self._config


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Config object with loaded configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid
        ValueError: If required sections or keys are missing or invalid
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f) or {}

    # Validate required sections
    missing_sections = [s for s in REQUIRED_SECTIONS if s not in config_dict]
    if missing_sections:
        raise ValueError(f"Missing required config sections: {missing_sections}")

    # Validate embedding config
    embedding = config_dict['embedding']
    policy = embedding.get('policy', 'strict')
    if policy not in VALID_POLICIES:
        raise ValueError(
            f"Invalid embedding policy '{policy}', expected one of {VALID_POLICIES}"
        )
    dtype = embedding.get('dtype', 'float32')
    if dtype not in VALID_DTYPES:
        raise ValueError(
            f"Invalid embedding dtype '{dtype}', expected one of {VALID_DTYPES}"
        )
    if 'expected_dimension' not in embedding:
        raise ValueError("Embedding config missing 'expected_dimension'")

    # Validate Ollama config
    for key in ('api_url', 'model'):
        if key not in config_dict['ollama']:
            raise ValueError(f"Ollama config missing '{key}'")

    return Config(config_dict)


def validate_config(config: Config) -> List[str]:
    """
    Validate configuration values.

    Args:
        config: Config object to validate

    Returns:
        List of warning messages (empty if all valid)
    """
    # embedding.base imports utils, so this cannot live at module level
    from ..embedding.strict import MAX_DIMENSION

    warnings = []

    # Check embedding configuration
    dimension = config.embedding.expected_dimension
    if dimension < 1:
        warnings.append("embedding expected_dimension should be at least 1")
    if dimension > MAX_DIMENSION and config.embedding.get('policy', 'strict') == 'strict':
        warnings.append(
            f"expected_dimension {dimension} exceeds the strict limit of "
            f"{MAX_DIMENSION}; embeddings will be rejected"
        )

    # Check Ollama configuration
    timeout = config.ollama.get('timeout', 60)
    if timeout < 10:
        warnings.append("Ollama timeout < 10 seconds may be too short")
    if config.ollama.get('max_retries', 3) < 1:
        warnings.append("Ollama max_retries should be at least 1")

    # Check directories exist or can be created
    log_dir = config.logging.log_dir
    if log_dir and not os.path.exists(log_dir):
        warnings.append(f"Log directory will be created: {log_dir}")

    return warnings
