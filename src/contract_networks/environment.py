"""Secret loading for contract-networks library."""

import os
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv
from loguru import logger

from .constants import INFURA_KEY_ENV, MNEMONIC_ENV
from .exceptions import MissingSecretError
from .paths import get_dotenv_path
from .types import SecretMaterial


def read_secrets(
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Union[Path, str]] = None,
) -> SecretMaterial:
    """
    Read the wallet mnemonic and Infura key from the environment.

    Args:
        environ: Explicit variable mapping. If None, a .env file is loaded
                 into os.environ first (existing variables win) and
                 os.environ is used.
        dotenv_path: .env location (defaults to ./.env)

    Returns:
        SecretMaterial; unset or empty variables become None
    """
    if environ is None:
        if dotenv_path is None:
            dotenv_path = get_dotenv_path()
        load_dotenv(dotenv_path, override=False)
        environ = os.environ

    mnemonic = environ.get(MNEMONIC_ENV) or None
    infura_key = environ.get(INFURA_KEY_ENV) or None

    # Missing secrets only matter once a remote provider is requested
    for name, value in ((MNEMONIC_ENV, mnemonic), (INFURA_KEY_ENV, infura_key)):
        if value is None:
            logger.warning("${} is not set; remote network providers will be unavailable", name)

    return SecretMaterial(mnemonic=mnemonic, infura_key=infura_key)


def require_secret(value: Optional[str], env_var: str) -> str:
    """
    Return a secret or fail naming the variable that should hold it.

    Raises:
        MissingSecretError: If value is None or empty
    """
    if not value:
        raise MissingSecretError(
            f"Environment variable ${env_var} is required: set it or add it to .env"
        )
    return value
