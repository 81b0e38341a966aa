"""minish package: a small interactive command interpreter.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__version__ = "0.1.0"

__all__: list[str] = []
