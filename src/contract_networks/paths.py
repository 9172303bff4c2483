"""Path management utilities for contract-networks library."""

import os
from pathlib import Path
from typing import Optional, Union

from .constants import CONTRACTS_BUILD_DIRECTORY


def get_project_root() -> Path:
    """
    Get default project root (current working directory).

    Returns:
        Absolute path of the working directory
    """
    return Path.cwd()


def _resolve_root(project_root: Optional[Union[Path, str]]) -> Path:
    if project_root is None:
        return get_project_root()
    return Path(project_root).absolute()


def get_dotenv_path(project_root: Optional[Union[Path, str]] = None) -> Path:
    """
    Get path of the .env file holding deployment secrets.

    Args:
        project_root: Custom project directory (defaults to cwd)

    Returns:
        Path to {project_root}/.env
    """
    return _resolve_root(project_root) / ".env"


def get_contracts_build_dir(
    project_root: Optional[Union[Path, str]] = None,
    build_directory: str = CONTRACTS_BUILD_DIRECTORY,
) -> Path:
    """
    Get the directory compiled contract ABIs are written to.

    Args:
        project_root: Custom project directory (defaults to cwd)
        build_directory: Directory relative to the project root

    Returns:
        Absolute, normalized path (parent references collapsed)
    """
    return Path(os.path.normpath(_resolve_root(project_root) / build_directory))
