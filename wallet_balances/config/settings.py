"""Loader for the ``config.yaml`` wallet list."""
from pathlib import Path
from typing import List, Union

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from ..constants import CONFIG_PATH
from ..exceptions import ConfigFileAccessError, ConfigParseError

logger = structlog.get_logger()


class WalletConfig(BaseModel):
    """RPC endpoint and the wallets to look up, in report order."""
    # Unquoted digit-only addresses load from YAML as ints
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    rpc_url: str
    wallets: List[str]


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "document"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def load_config(path: Union[str, Path] = CONFIG_PATH) -> WalletConfig:
    """
    Read and validate the wallet config file.

    Args:
        path: Location of the YAML file, relative to the working directory

    Returns:
        The parsed configuration

    Raises:
        ConfigFileAccessError: If the file is missing or unreadable
        ConfigParseError: If the YAML is malformed or does not match WalletConfig
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigParseError(path, f"not UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise ConfigFileAccessError(path, e.strerror or str(e)) from e

    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(path, f"malformed YAML: {e}") from e

    if not isinstance(document, dict):
        found = "an empty document" if document is None else type(document).__name__
        raise ConfigParseError(path, f"expected a mapping at top level, got {found}")

    try:
        config = WalletConfig.model_validate(document)
    except ValidationError as e:
        raise ConfigParseError(path, _format_validation_error(e)) from e

    logger.info("config_loaded", path=str(path), wallets=len(config.wallets))
    return config
