from __future__ import annotations

from cyclorank.core import cli as _core_cli

app = _core_cli.app

if __name__ == "__main__":
    app()
