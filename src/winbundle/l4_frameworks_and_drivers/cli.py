"""CLI entry point for winbundle."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import click

from winbundle import __version__
from winbundle.l1_entities.errors import BundleError, ConfigError


def _build_container(ctx_obj: dict):
    from winbundle.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml/pydantic stack not loaded on --help
        YamlConfigLoader,
    )
    from winbundle.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: not needed for --help
        DependencyContainer,
    )
    from winbundle.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        build_app_config,
    )

    overrides: dict = {}
    if ctx_obj['sysroot'] is not None:
        overrides['search'] = {'sysroot': ctx_obj['sysroot']}
    if ctx_obj['backends']:
        overrides['inspector'] = {'backends': list(ctx_obj['backends'])}

    try:
        raw = YamlConfigLoader().load_raw(ctx_obj['config_path'], overrides=overrides or None)
    except FileNotFoundError as e:
        raise ConfigError(str(e)) from e
    config = build_app_config(raw)
    if ctx_obj['system_libs']:
        config = config.model_copy(update={'system_libs': [*config.system_libs, *ctx_obj['system_libs']]})
    return DependencyContainer(config)


def _fail(e: BundleError) -> NoReturn:
    click.echo(f'Error: {e}', err=True)
    sys.exit(e.exit_code)


@click.group()
@click.option(
    '--sysroot',
    default=None,
    help='Root to search for DLLs (ROOT, ROOT/bin, ROOT/lib). Empty or unset searches PATH.',
)
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Path to YAML config file.',
)
@click.option(
    '--system-lib',
    'system_libs',
    multiple=True,
    help='Extra DLL name provided by the target system (repeatable).',
)
@click.option(
    '--backend',
    'backends',
    multiple=True,
    type=click.Choice(['objdump', 'dumpbin']),
    help='Inspector backend to try, in order (repeatable). Default: objdump, then dumpbin.',
)
@click.option('-v', '--verbose', count=True, help='More diagnostics (-vv for debug).')
@click.option('-q', '--quiet', count=True, help='Only report errors.')
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False),
    help='Also write debug logs to this file.',
)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, sysroot, config_path, system_libs, backends, verbose, quiet, log_file):
    """winbundle -- bundle the DLL dependencies of Windows binaries."""
    from winbundle.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_console_logging,
        setup_file_logging,
        verbosity_level,
    )

    setup_console_logging(verbosity_level(verbose, quiet))
    if log_file:
        try:
            setup_file_logging(Path(log_file))
        except BundleError as e:
            _fail(e)

    ctx.obj = {
        'sysroot': sysroot,
        'config_path': config_path,
        'system_libs': system_libs,
        'backends': backends,
    }


@cli.command()
@click.argument('outpath', type=click.Path(file_okay=False, path_type=Path))
@click.argument('obj', nargs=-1, required=True, type=click.Path(path_type=Path))
@click.pass_obj
def bundle(ctx_obj, outpath, obj):
    """Create a usable bundle: copy OBJ files and every DLL they need into OUTPATH."""
    try:
        container = _build_container(ctx_obj)
        report = container.bundler.execute(list(obj), outpath)
    except BundleError as e:
        _fail(e)

    for src in report.copied:
        click.echo(str(src))


@cli.command('list')
@click.argument('obj', nargs=-1, required=True, type=click.Path(path_type=Path))
@click.pass_obj
def list_(ctx_obj, obj):
    """List the DLL dependencies of OBJ files, one resolved path per line."""
    try:
        container = _build_container(ctx_obj)
        result = container.resolver.execute(list(obj))
    except BundleError as e:
        _fail(e)

    for path in result.paths:
        click.echo(str(path))
