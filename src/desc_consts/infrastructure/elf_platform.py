#!/usr/bin/env python3

"""Target architecture detection from ELF files.

Constant files are kept per target architecture. When resolving constants
for a kernel build, the architecture is taken from the kernel image based on:
- Machine type (e.g., x86-64, AArch64)
- ELF class (32 vs 64 bit)
- Endianness (little-endian vs big-endian)
"""

from enum import Enum

from elftools.common.exceptions import ELFError
from elftools.elf.elffile import ELFFile

from .logging import get_logger

logger = get_logger(__name__)


class TargetArch(Enum):
    """Supported target architectures, named as in const file suffixes."""

    AMD64 = "amd64"
    I386 = "386"
    ARM64 = "arm64"
    ARM = "arm"
    PPC64LE = "ppc64le"
    MIPS64LE = "mips64le"
    S390X = "s390x"
    RISCV64 = "riscv64"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "TargetArch":
        """Look up an architecture by its const file suffix.

        Raises:
            ValueError: If name is not a known architecture
        """
        for arch in cls:
            if arch is not cls.UNKNOWN and arch.value == name:
                return arch
        known = ", ".join(a.value for a in cls if a is not cls.UNKNOWN)
        raise ValueError(f"Unknown target architecture {name!r} (known: {known})")


class ArchDetector:
    """Detects the target architecture of an ELF file."""

    # (e_machine as returned by pyelftools, elfclass, little_endian) -> arch
    MACHINES = {
        ("EM_X86_64", 64, True): TargetArch.AMD64,
        ("EM_386", 32, True): TargetArch.I386,
        ("EM_AARCH64", 64, True): TargetArch.ARM64,
        ("EM_ARM", 32, True): TargetArch.ARM,
        ("EM_PPC64", 64, True): TargetArch.PPC64LE,
        ("EM_MIPS", 64, True): TargetArch.MIPS64LE,
        ("EM_S390", 64, False): TargetArch.S390X,
        ("EM_RISCV", 64, True): TargetArch.RISCV64,
    }

    @staticmethod
    def detect(elf_path: str) -> TargetArch:
        """Detect target architecture from ELF file.

        Args:
            elf_path: Path to the ELF file

        Returns:
            Detected architecture, or UNKNOWN
        """
        try:
            with open(elf_path, "rb") as f:
                elf = ELFFile(f)  # type: ignore[no-untyped-call]
                machine_str = elf.header["e_machine"]
                elf_class: int = elf.elfclass
                is_little_endian: bool = elf.little_endian
        except (OSError, ELFError) as e:
            logger.error(f"Failed to detect architecture from {elf_path}: {e}")
            return TargetArch.UNKNOWN

        logger.debug(
            f"ELF Characteristics: machine={machine_str}, "
            f"class={elf_class}, little_endian={is_little_endian}"
        )

        arch = ArchDetector.MACHINES.get((machine_str, elf_class, is_little_endian))
        if arch is None:
            logger.warning(
                f"Unknown architecture: machine={machine_str} "
                f"(class={elf_class}, little_endian={is_little_endian})"
            )
            return TargetArch.UNKNOWN

        logger.info(f"Detected {arch} ELF ({machine_str})")
        return arch
