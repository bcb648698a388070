"""
VisionSets Command-Line Interface.

Provides the ``visionsets`` entry point with three commands:

- ``visionsets list``  — show the registered benchmark datasets
- ``visionsets fetch`` — download (if needed) and decode a dataset
- ``visionsets init``  — write a starter loader config YAML

Usage:
    visionsets list
    visionsets fetch mnist --verbose
    visionsets fetch cifar100 --data-home ~/datasets/cifar100 --force
    visionsets fetch cifar10 --config loader.yaml
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

app = typer.Typer(
    name="visionsets",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


# ── App callback ────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from importlib.metadata import version as pkg_version

        typer.echo(f"visionsets {pkg_version('visionsets')}")
        raise typer.Exit()


@app.callback()
def main(
    _: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """VisionSets: download and decode MNIST, Fashion-MNIST, CIFAR-10 and CIFAR-100."""
    ...  # pragma: no cover


# ── Commands ────────────────────────────────────────────────────────────────


@app.command("list")
def list_datasets() -> None:
    """List the registered datasets and their cache layout."""
    from visionsets.core.metadata import DATASET_REGISTRY

    for key, meta in DATASET_REGISTRY.items():
        labels = "coarse/fine" if meta.label_width == 2 else "single"
        typer.echo(
            f"{key:<15} {meta.display_name:<15} {meta.resolution_str:<9} "
            f"{meta.num_classes:>3} classes  {labels:<11} default home: {meta.default_home}"
        )


@app.command()
def fetch(
    name: Annotated[str, typer.Argument(help="Dataset name (see 'visionsets list').")],
    data_home: Annotated[
        Path | None,
        typer.Option("--data-home", "-d", help="Cache directory (default: per dataset)."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Re-download even if the cache looks complete."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print progress messages."),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Loader config YAML; flags override it."),
    ] = None,
    log_dir: Annotated[
        Path | None,
        typer.Option("--log-dir", help="Also write a rotating log file here."),
    ] = None,
) -> None:
    """Download (if needed) and decode a dataset, then log its split sizes."""
    from visionsets.core import (
        LOGGER_NAME,
        LoaderConfig,
        Logger,
        get_dataset_metadata,
        log_dataset_summary,
    )
    from visionsets.data_handler import load_dataset
    from visionsets.exceptions import VisionError

    Logger.setup(name=LOGGER_NAME, log_dir=log_dir, level="INFO")

    try:
        metadata = get_dataset_metadata(name)
        if config is not None:
            cfg = LoaderConfig.from_yaml(
                config,
                data_home=data_home,
                force_download=force or None,
                verbose=verbose or None,
            )
        else:
            cfg = LoaderConfig(data_home=data_home, force_download=force, verbose=verbose)

        dataset = load_dataset(metadata.name, cfg)

    except (VisionError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    log_dataset_summary(dataset, f"{metadata.display_name} ({cfg.resolve_home(metadata)})")


@app.command()
def init(
    output: Annotated[
        Path,
        typer.Argument(help="Output YAML file path."),
    ] = Path("loader.yaml"),
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file."),
    ] = False,
) -> None:
    """Generate a starter loader config with all fields and defaults."""
    from visionsets.core import LoaderConfig, save_config_as_yaml

    if output.exists() and not force:
        typer.echo(f"Error: '{output}' already exists. Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    save_config_as_yaml(LoaderConfig(), output)
    typer.echo(f"Config created: {output}")
    typer.echo(f"Use it with:    visionsets fetch mnist --config {output}")
