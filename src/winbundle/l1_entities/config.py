"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class UnknownFormatPolicy(str, enum.Enum):
    """What to do with a binary whose format tag could not be determined."""

    ACCEPT = 'accept'
    REJECT = 'reject'


class SearchRoot(BaseModel):
    sysroot: str = ''  # '' = search the directories of path_variable
    path_variable: str = 'PATH'

    @property
    def is_explicit(self) -> bool:
        return bool(self.sysroot)


class InspectorConfig(BaseModel):
    backends: list[str]
    objdump: str
    dumpbin: str
    timeout: float | None = None  # None = wait for the tool to finish


class FormatConfig(BaseModel):
    unknown: UnknownFormatPolicy


class AppConfig(BaseModel):
    system_libs: list[str] = Field(default_factory=list)
    search: SearchRoot
    inspector: InspectorConfig
    format: FormatConfig
