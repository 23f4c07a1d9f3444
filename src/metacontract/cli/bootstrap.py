"""CLI bootstrap helpers: logging and settings resolution."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from metacontract.config import ContractSettings, load_contract_settings

_LOGGING_CONFIGURED = False


def configure_logging(*, verbose: bool = False) -> None:
    """Configure Rich-backed logging once for CLI commands.

    Log output goes to stderr so stdout carries only the result envelope.

    Args:
        verbose: Emit debug-level decision logs.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True), show_path=False, rich_tracebacks=True
            )
        ],
    )
    _LOGGING_CONFIGURED = True


def resolve_settings(config_file: Path | None) -> ContractSettings:
    """Load settings from config_file, or defaults when no file is given.

    Args:
        config_file: Optional YAML/JSON config path.

    Returns:
        Contract settings.

    Raises:
        ContractConfigError: If the file cannot be decoded or validated.
    """
    if config_file is None:
        return ContractSettings()
    return load_contract_settings(config_file)
