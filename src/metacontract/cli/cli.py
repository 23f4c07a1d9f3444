"""Typer CLI for invoking meta contract entry points locally."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from metacontract.cli.bootstrap import configure_logging, resolve_settings
from metacontract.config import ContractConfigError
from metacontract.contract import MetaContractService
from metacontract.types import MetaContract, MetaContractResult, Transaction

app = typer.Typer(help="Meta contract validation CLI")
_CONSOLE = Console()
_LOGGER = logging.getLogger(__name__)

_EXIT_REJECTED = 1
_EXIT_CONFIG = 2

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        file_okay=True,
        dir_okay=False,
        help="Path to contract policy YAML/JSON file.",
    ),
]
VerboseOption = Annotated[
    bool, typer.Option("--verbose", "-v", help="Log policy decisions.")
]


def _build_service(config_file: Path | None) -> MetaContractService:
    """Build service from config file.

    Args:
        config_file: Optional config path.

    Returns:
        Service bound to the loaded settings.

    Raises:
        Exit: With config exit code when the config is invalid.
    """
    try:
        settings = resolve_settings(config_file)
    except ContractConfigError as exc:
        _CONSOLE.print(
            f"[bold red]Invalid contract config: {escape(str(exc))}[/bold red]"
        )
        raise typer.Exit(code=_EXIT_CONFIG) from exc
    return MetaContractService(settings)


def _emit(result: MetaContractResult) -> None:
    """Print result envelope as JSON and exit with its status.

    Raises:
        Exit: Always; code 0 on success, 1 on rejection.
    """
    _CONSOLE.print_json(result.model_dump_json())
    if not result.result:
        _LOGGER.info("rejected: %s", result.error_string)
        raise typer.Exit(code=_EXIT_REJECTED)
    raise typer.Exit(code=0)


@app.command("execute")
def execute_command(
    data: Annotated[str, typer.Option("--data", help="Raw transaction payload.")],
    public_key: Annotated[
        str, typer.Option("--public-key", help="Submitter public key.")
    ] = "",
    version: Annotated[str, typer.Option(help="Transaction version tag.")] = "",
    meta_contract_id: Annotated[
        str, typer.Option("--meta-contract-id", help="Contract identifier.")
    ] = "",
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Validate a transaction payload and print the result envelope.

    Args:
        data: Raw transaction payload text.
        public_key: Submitter public key.
        version: Transaction version tag.
        meta_contract_id: Contract identifier.
        config_file: Optional policy config path.
        verbose: Whether to log policy decisions.
    """
    configure_logging(verbose=verbose)
    service = _build_service(config_file)
    contract = MetaContract(meta_contract_id=meta_contract_id)
    transaction = Transaction(
        meta_contract_id=meta_contract_id,
        data=data,
        public_key=public_key,
        version=version,
    )
    _emit(service.on_execute(contract, [], transaction))


@app.command("mint")
def mint_command(
    data: Annotated[
        str, typer.Option("--data", help="Hex ABI-encoded (string,string,string).")
    ] = "",
    public_key: Annotated[
        str, typer.Option("--public-key", help="Contract owner public key.")
    ] = "",
    data_key: Annotated[str, typer.Option("--data-key", help="Data key.")] = "",
    token_id: Annotated[str, typer.Option("--token-id", help="Token id.")] = "",
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Derive mint metadata records and print the result envelope.

    Args:
        data: Hex-encoded mint payload, or empty.
        public_key: Contract owner public key.
        data_key: Data key forwarded to the contract.
        token_id: Token id forwarded to the contract.
        config_file: Optional policy config path.
        verbose: Whether to log policy decisions.
    """
    configure_logging(verbose=verbose)
    service = _build_service(config_file)
    contract = MetaContract(public_key=public_key)
    _emit(service.on_mint(contract, data_key, token_id, data))


@app.command("clone")
def clone_command() -> None:
    """Acknowledge a clone request."""
    configure_logging()
    accepted = MetaContractService().on_clone()
    _CONSOLE.print_json(data={"result": accepted})
    raise typer.Exit(code=0 if accepted else _EXIT_REJECTED)


def main() -> None:
    """Console script entrypoint."""
    app()
