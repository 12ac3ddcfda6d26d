"""winbundle -- bundle the DLL dependencies of native binaries into one directory."""

__version__ = '0.1.0'
