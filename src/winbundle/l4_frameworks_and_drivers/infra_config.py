"""Built-in configuration defaults — lives in L4, not domain."""

from __future__ import annotations

import copy

from pydantic import ValidationError

from winbundle.l1_entities.config import AppConfig
from winbundle.l1_entities.errors import ConfigError
from winbundle.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

# lowercase; DLLs every Windows installation provides
DEFAULT_SYSTEM_LIBS: list[str] = [
    'advapi32.dll',
    'kernel32.dll',
    'msvcrt.dll',
    'shell32.dll',
    'userenv.dll',
    'ws2_32.dll',
]

APP_CONFIG_DEFAULTS: dict = {
    'system_libs': DEFAULT_SYSTEM_LIBS,
    'search': {
        'sysroot': '',
        'path_variable': 'PATH',
    },
    'inspector': {
        'backends': ['objdump', 'dumpbin'],
        'objdump': 'objdump',
        'dumpbin': 'dumpbin',
        'timeout': None,
    },
    'format': {
        'unknown': 'accept',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    try:
        return AppConfig.model_validate(merged)
    except ValidationError as e:
        raise ConfigError(f'Invalid configuration: {e}') from e
