"""file_agent package: a sandboxed file-system agent driven by typed or random commands.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
