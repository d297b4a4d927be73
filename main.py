"""Atajo para ejecutar order-dispatch desde un checkout.

Uso: `python main.py [samples] [--verbose]`.

Añade `src/` a `sys.path` para que `cli`, `core` y `adapters` se importen sin
instalar el paquete.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
