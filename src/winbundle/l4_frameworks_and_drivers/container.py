"""Dependency container — wires gateways to use cases from one AppConfig."""

from __future__ import annotations

from collections.abc import Mapping

from winbundle.l1_entities.config import AppConfig
from winbundle.l1_entities.dependency import SystemLibrarySet
from winbundle.l1_entities.errors import ConfigError
from winbundle.l2_use_cases.bundle_use_case import AssembleBundleUseCase
from winbundle.l2_use_cases.ports.process_runner import ProcessRunner
from winbundle.l2_use_cases.resolve_dependencies_use_case import ResolveDependenciesUseCase
from winbundle.l2_use_cases.search_strategy import SearchStrategy
from winbundle.l3_interface_adapters.gateways.dumpbin_backend import DumpbinBackend
from winbundle.l3_interface_adapters.gateways.fallback_inspector import FallbackBinaryInspector, InspectorBackend
from winbundle.l3_interface_adapters.gateways.file_bundle_assembler import FileBundleAssembler
from winbundle.l3_interface_adapters.gateways.objdump_backend import ObjdumpBackend
from winbundle.l3_interface_adapters.gateways.subprocess_runner import SubprocessRunner

BACKEND_NAMES = ('objdump', 'dumpbin')


def build_backends(config: AppConfig, runner: ProcessRunner) -> list[InspectorBackend]:
    backends: list[InspectorBackend] = []
    for name in config.inspector.backends:
        if name == 'objdump':
            backends.append(ObjdumpBackend(runner, executable=config.inspector.objdump))
        elif name == 'dumpbin':
            backends.append(DumpbinBackend(runner, executable=config.inspector.dumpbin))
        else:
            raise ConfigError(f'Unknown inspector backend {name!r} (choose from {", ".join(BACKEND_NAMES)})')
    if not backends:
        raise ConfigError('At least one inspector backend must be configured')
    return backends


class DependencyContainer:
    """Builds the object graph for one CLI invocation."""

    def __init__(
        self,
        config: AppConfig,
        runner: ProcessRunner | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.config = config
        self.runner = runner or SubprocessRunner(timeout=config.inspector.timeout)
        self.inspector = FallbackBinaryInspector(build_backends(config, self.runner))
        self.search = SearchStrategy(config.search, environ)
        self.system_libs = SystemLibrarySet(config.system_libs)
        self.resolver = ResolveDependenciesUseCase(
            inspector=self.inspector,
            search=self.search,
            system_libs=self.system_libs,
            unknown_format=config.format.unknown,
        )
        self.assembler = FileBundleAssembler()
        self.bundler = AssembleBundleUseCase(self.resolver, self.assembler)
