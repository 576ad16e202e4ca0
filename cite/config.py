"""
Runtime configuration for cite.

Values come from the environment (optionally populated from a .env file).
The toolchain layout itself lives in toolchain.yaml next to this module and is
loaded with OmegaConf so program names can interpolate the environment.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()

PACKAGE_PATH = Path(__file__).resolve().parent
TOOLCHAIN_CONFIG_PATH = PACKAGE_PATH / "toolchain.yaml"

_logs_path = os.getenv("CITE_LOGS_PATH")
LOGS_PATH: Optional[Path] = Path(_logs_path) if _logs_path else None
LOG_LEVEL = os.getenv("CITE_LOG_LEVEL", "WARNING").upper()

# Fixed file names inside the scratch directory
DOCUMENT_NAME = "document"
BIBLIOGRAPHY_FILENAME = "bibliography.bib"


def load_toolchain_config(config_path: Path = None) -> Dict[str, Any]:
    """
    Load toolchain.yaml and resolve all interpolations.

    Args:
        config_path: Optional path to an alternative toolchain file

    Returns:
        Plain dict with "document", "programs" and "steps" keys
    """
    if config_path is None:
        config_path = TOOLCHAIN_CONFIG_PATH

    return OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)


def toolchain_programs(config_path: Path = None) -> Dict[str, str]:
    """Return the resolved program name for each toolchain tool."""
    return load_toolchain_config(config_path)["programs"]
