"""Configuration management for the constants tool."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from ...utils.path_utils import expand_arch_pattern
from ..elf_platform import TargetArch


@dataclass
class Config:
    """Configuration for the constants tool."""

    const_glob: str
    output_dir: Path
    arch: Optional[TargetArch] = None
    verbose: bool = False
    log_dir: Path = Path("logs")

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object

        Raises:
            ValueError: If TARGET_ARCH names an unknown architecture
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        const_glob = os.getenv("CONST_GLOB", "")
        output_dir = Path(os.getenv("OUTPUT_DIR", "output"))
        log_dir = Path(os.getenv("LOG_DIR", "logs"))
        arch_str = os.getenv("TARGET_ARCH", "")
        verbose = os.getenv("VERBOSE", "false").lower() in ("true", "1", "yes")

        arch = TargetArch.from_name(arch_str) if arch_str else None

        return cls(
            const_glob=const_glob,
            output_dir=output_dir,
            arch=arch,
            verbose=verbose,
            log_dir=log_dir,
        )

    @classmethod
    def from_args(
        cls,
        const_glob: Optional[str] = None,
        output_dir: Optional[Path] = None,
        arch: Optional[TargetArch] = None,
        verbose: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Args:
            const_glob: Const file glob pattern (overrides env)
            output_dir: Output directory (overrides env)
            arch: Target architecture (overrides env)
            verbose: Enable verbose output (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if const_glob is not None:
            config.const_glob = const_glob
        if output_dir is not None:
            config.output_dir = output_dir
        if arch is not None:
            config.arch = arch
        if verbose is not None:
            config.verbose = verbose

        return config

    @property
    def resolved_glob(self) -> str:
        """Const glob with the ``{arch}`` placeholder substituted."""
        return expand_arch_pattern(self.const_glob, self.arch)

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.const_glob:
            raise ValueError("No const file glob given (argument or CONST_GLOB)")

        if self.arch is TargetArch.UNKNOWN:
            raise ValueError("Target architecture could not be determined")

        if "{arch}" in self.const_glob and self.arch is None:
            raise ValueError(f"Glob {self.const_glob!r} needs a target architecture")

    def ensure_output_dir(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
