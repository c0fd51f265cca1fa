"""modflow CLI layer.

``cli`` and ``main`` are loaded lazily so ``python -m modflow.cli.main``
does not find the module already imported.
"""

__all__ = ["cli", "main"]


def __getattr__(name):
    if name == "cli":
        from .main import cli

        return cli
    if name == "main":
        from .main import main

        return main
    raise AttributeError(name)
