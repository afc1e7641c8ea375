"""Tests for configuration management functionality."""

from pathlib import Path

import pytest

from objc_header_reconstructor import __version__
from objc_header_reconstructor.infrastructure.config import Config, get_config

ENV_KEYS = ("BINARY_PATH", "OUTPUT_DIR", "SHARED_CACHE_PATH", "VERBOSE", "LOG_DIR")


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no configuration variables set."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.mark.unit
def test_config_defaults(clean_env) -> None:
    """Test defaults without environment or .env file."""
    config = Config.from_env()

    assert config.binary_path is None
    assert config.output_dir == Path("output")
    assert config.shared_cache_path is None
    assert config.verbose is False
    assert config.log_dir == Path("logs")
    assert config.tool_version == __version__


@pytest.mark.unit
def test_config_from_env(clean_env, monkeypatch) -> None:
    """Test configuration loading from environment variables."""
    monkeypatch.setenv("BINARY_PATH", "Widgets.json")
    monkeypatch.setenv("OUTPUT_DIR", "headers")
    monkeypatch.setenv("SHARED_CACHE_PATH", "cache.json")
    monkeypatch.setenv("VERBOSE", "yes")
    monkeypatch.setenv("LOG_DIR", "")

    config = Config.from_env()

    assert config.binary_path == Path("Widgets.json")
    assert config.output_dir == Path("headers")
    assert config.shared_cache_path == Path("cache.json")
    assert config.verbose is True
    assert config.log_dir is None


@pytest.mark.unit
def test_config_env_file_loading(clean_env) -> None:
    """Test values are read from a .env file."""
    env_file = clean_env / ".env"
    env_file.write_text("BINARY_PATH=FromFile.json\nVERBOSE=true\n", encoding="utf-8")

    config = Config.from_env(env_file)

    assert config.binary_path == Path("FromFile.json")
    assert config.verbose is True


@pytest.mark.unit
def test_config_from_args_overrides_env(clean_env, monkeypatch) -> None:
    """Test explicit arguments win over the environment."""
    monkeypatch.setenv("OUTPUT_DIR", "from_env")
    monkeypatch.setenv("VERBOSE", "true")

    config = Config.from_args(binary_path=Path("a.json"), output_dir=Path("out"), verbose=False)

    assert config.binary_path == Path("a.json")
    assert config.output_dir == Path("out")
    assert config.verbose is False


@pytest.mark.unit
def test_config_from_args_keeps_env_for_missing(clean_env, monkeypatch) -> None:
    """Test unset arguments fall back to the environment."""
    monkeypatch.setenv("OUTPUT_DIR", "from_env")

    assert Config.from_args().output_dir == Path("from_env")


@pytest.mark.unit
class TestConfigValidation:
    """Test configuration validation."""

    def test_missing_binary(self, clean_env) -> None:
        """Test a binary is required by default."""
        with pytest.raises(ValueError, match="No binary"):
            Config(binary_path=None, output_dir=Path("out")).validate()

    def test_binary_not_found(self, clean_env) -> None:
        """Test nonexistent binaries are rejected."""
        with pytest.raises(ValueError, match="not found"):
            Config(binary_path=clean_env / "missing.json", output_dir=Path("out")).validate()

    def test_binary_is_directory(self, clean_env) -> None:
        """Test directories are rejected."""
        with pytest.raises(ValueError, match="Not a file"):
            Config(binary_path=clean_env, output_dir=Path("out")).validate()

    def test_binary_optional(self, clean_env) -> None:
        """Test address lookups need no binary."""
        Config(binary_path=None, output_dir=Path("out")).validate(require_binary=False)

    def test_shared_cache_not_found(self, clean_env) -> None:
        """Test a configured shared cache must exist."""
        binary = clean_env / "a.json"
        binary.write_text("{}", encoding="utf-8")
        config = Config(
            binary_path=binary,
            output_dir=Path("out"),
            shared_cache_path=clean_env / "cache.json",
        )

        with pytest.raises(ValueError, match="Shared cache"):
            config.validate()

    def test_ensure_output_dir(self, clean_env) -> None:
        """Test nested output directories are created."""
        config = Config(binary_path=None, output_dir=clean_env / "a" / "b")

        config.ensure_output_dir()

        assert config.output_dir.is_dir()


@pytest.mark.unit
class TestGenerationConfig:
    """Test generation tunables."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = get_config()

        assert config["ROOT_CLASS"] == "NSObject"
        assert config["ROOT_FRAMEWORK"] == "Foundation"
        assert config["UMBRELLA_SUFFIX"] == "-Umbrella"
        assert config["DIRECTORY_MODE"] == 0o750

    def test_env_overrides(self, monkeypatch) -> None:
        """Test OBJC_-prefixed variables override values."""
        monkeypatch.setenv("OBJC_UMBRELLA_SUFFIX", "-All")
        monkeypatch.setenv("OBJC_DIRECTORY_MODE", "0o700")

        config = get_config()

        assert config["UMBRELLA_SUFFIX"] == "-All"
        assert config["DIRECTORY_MODE"] == 0o700

    def test_invalid_int_override_is_ignored(self, monkeypatch) -> None:
        """Test unparsable integers keep the default."""
        monkeypatch.setenv("OBJC_DIRECTORY_MODE", "rwx")

        assert get_config()["DIRECTORY_MODE"] == 0o750
