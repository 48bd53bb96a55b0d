"""Tests for configuration management functionality."""

from pathlib import Path

import pytest

from desc_consts.infrastructure.config import Config
from desc_consts.infrastructure.elf_platform import TargetArch


@pytest.mark.unit
def test_config_defaults(clean_env) -> None:
    """Test configuration defaults without environment."""
    config = Config.from_env()

    assert config.const_glob == ""
    assert config.output_dir == Path("output")
    assert config.log_dir == Path("logs")
    assert config.arch is None
    assert config.verbose is False


@pytest.mark.unit
def test_config_from_env_vars(clean_env) -> None:
    """Test loading configuration from environment variables."""
    clean_env.setenv("CONST_GLOB", "sys/linux/*_{arch}.const")
    clean_env.setenv("OUTPUT_DIR", "test_output")
    clean_env.setenv("TARGET_ARCH", "arm64")
    clean_env.setenv("VERBOSE", "yes")

    config = Config.from_env()

    assert config.const_glob == "sys/linux/*_{arch}.const"
    assert str(config.output_dir).endswith("test_output")
    assert config.arch is TargetArch.ARM64
    assert config.verbose is True
    assert config.resolved_glob == "sys/linux/*_arm64.const"


@pytest.mark.unit
def test_config_env_file_loading(clean_env, tmp_path) -> None:
    """Test loading configuration from a .env file."""
    env_file = tmp_path / ".env"
    env_file.write_text("CONST_GLOB=consts/*.const\nTARGET_ARCH=386\n", encoding="utf-8")

    config = Config.from_env(env_file)

    assert config.const_glob == "consts/*.const"
    assert config.arch is TargetArch.I386


@pytest.mark.unit
def test_config_bad_arch_in_env(clean_env) -> None:
    """Test that an unknown TARGET_ARCH is rejected."""
    clean_env.setenv("TARGET_ARCH", "vax")

    with pytest.raises(ValueError, match="Unknown target architecture"):
        Config.from_env()


@pytest.mark.unit
def test_config_from_args_overrides_env(clean_env) -> None:
    """Test that explicit arguments win over environment values."""
    clean_env.setenv("CONST_GLOB", "env/*.const")

    config = Config.from_args(const_glob="args/*.const", arch=TargetArch.AMD64, verbose=True)

    assert config.const_glob == "args/*.const"
    assert config.arch is TargetArch.AMD64
    assert config.verbose is True


@pytest.mark.unit
def test_config_validation(clean_env) -> None:
    """Test configuration validation and error handling."""
    with pytest.raises(ValueError, match="No const file glob"):
        Config.from_args().validate()

    with pytest.raises(ValueError, match="needs a target architecture"):
        Config.from_args(const_glob="*_{arch}.const").validate()

    with pytest.raises(ValueError, match="could not be determined"):
        Config.from_args(const_glob="*.const", arch=TargetArch.UNKNOWN).validate()

    Config.from_args(const_glob="*.const").validate()


@pytest.mark.unit
def test_ensure_output_dir(clean_env, tmp_path) -> None:
    """Test that the output directory is created on demand."""
    config = Config.from_args(const_glob="*.const", output_dir=tmp_path / "out" / "nested")

    config.ensure_output_dir()

    assert config.output_dir.is_dir()
