#!/usr/bin/env python3
"""
Entry point for Desc Consts.

This file allows running the tool directly from the project root:
    python main.py 'sys/linux/*_{arch}.const' --arch amd64 --check
"""

import sys
from pathlib import Path

# Add src to path for development mode
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from desc_consts.main import main

if __name__ == "__main__":
    main()
