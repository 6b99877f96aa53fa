import logging
from pathlib import Path

import colorlog
import pytest
import yaml

from rag_embeddings.utils.config import Config, load_config, validate_config
from rag_embeddings.utils.logger import get_logger, setup_logging


PROJECT_ROOT = Path(__file__).parent.parent


# ============== Fixtures ==============

@pytest.fixture
def config_dict(tmp_path):
    """A valid configuration dictionary."""
    return {
        "embedding": {
            "policy": "strict",
            "dtype": "float32",
            "expected_dimension": 768,
        },
        "ollama": {
            "api_url": "http://localhost:11434/api/embed",
            "model": "llama3.2",
            "timeout": 30,
            "max_retries": 2,
        },
        "logging": {
            "level": "DEBUG",
            "log_dir": str(tmp_path / "logs"),
            "format": "%(levelname)s %(message)s",
        },
    }


@pytest.fixture
def write_config(tmp_path):
    """Write a dict to a YAML file and return its path."""
    def _write(data):
        path = tmp_path / "embeddings.yaml"
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def restore_root_logger():
    """Drop the handlers installed by setup_logging and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) in (logging.FileHandler, colorlog.StreamHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


# ============== Tests ==============

class TestLoadConfig:
    """Tests for YAML configuration loading."""

    def test_loads_valid_config(self, config_dict, write_config):
        """Test attribute-style access on a loaded config."""
        config = load_config(write_config(config_dict))

        assert isinstance(config.embedding, Config)
        assert config.embedding.policy == "strict"
        assert config.embedding.expected_dimension == 768
        assert config.ollama.model == "llama3.2"
        assert config.ollama.get("batch_size", 32) == 32
        assert config.to_dict() == config_dict

    def test_shipped_config_is_valid(self):
        """Test that the repository's default config loads."""
        config = load_config(str(PROJECT_ROOT / "config" / "embeddings.yaml"))
        assert config.embedding.policy in ("strict", "dynamic")
        assert config.ollama.model == "llama3.2"

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nope.yaml"))

    def test_missing_section(self, config_dict, write_config):
        """Test that required sections are enforced."""
        del config_dict["ollama"]
        with pytest.raises(ValueError, match="ollama"):
            load_config(write_config(config_dict))

    def test_invalid_policy(self, config_dict, write_config):
        """Test that unknown policies are rejected."""
        config_dict["embedding"]["policy"] = "lenient"
        with pytest.raises(ValueError, match="policy"):
            load_config(write_config(config_dict))

    def test_invalid_dtype(self, config_dict, write_config):
        """Test that storage below 32 bits is rejected."""
        config_dict["embedding"]["dtype"] = "float16"
        with pytest.raises(ValueError, match="dtype"):
            load_config(write_config(config_dict))

    def test_missing_model(self, config_dict, write_config):
        """Test that the Ollama model name is required."""
        del config_dict["ollama"]["model"]
        with pytest.raises(ValueError, match="model"):
            load_config(write_config(config_dict))


class TestValidateConfig:
    """Tests for soft configuration warnings."""

    def test_valid_config_has_only_log_dir_warning(self, config_dict):
        """Test that a sane config only notes the log directory to create."""
        warnings = validate_config(Config(config_dict))
        assert len(warnings) == 1
        assert "Log directory" in warnings[0]

    def test_dimension_above_strict_limit(self, config_dict):
        """Test the warning for dimensions the strict policy rejects."""
        config_dict["embedding"]["expected_dimension"] = 70000
        warnings = validate_config(Config(config_dict))
        assert any("65535" in w for w in warnings)

        config_dict["embedding"]["policy"] = "dynamic"
        warnings = validate_config(Config(config_dict))
        assert not any("65535" in w for w in warnings)

    def test_short_timeout(self, config_dict):
        """Test the warning for very short request timeouts."""
        config_dict["ollama"]["timeout"] = 2
        warnings = validate_config(Config(config_dict))
        assert any("timeout" in w for w in warnings)


class TestLogging:
    """Tests for logging setup."""

    def test_creates_log_file(self, tmp_path, restore_root_logger):
        """Test console and file handlers."""
        log_file = setup_logging("DEBUG", log_dir=str(tmp_path / "logs"))

        assert log_file is not None
        assert Path(log_file).exists()
        assert Path(log_file).name.startswith("rag_embeddings_")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2

        get_logger("rag_embeddings.test").debug("hello file")
        for handler in root.handlers:
            handler.flush()
        assert "hello file" in Path(log_file).read_text(encoding="utf-8")

    def test_console_only(self, restore_root_logger):
        """Test that log_dir=None disables file output."""
        assert setup_logging("warning", log_dir=None) is None
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
