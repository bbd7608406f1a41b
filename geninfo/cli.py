"""
gen-info - Punto de entrada de línea de comandos

Uso:
    gen-info <rom...>
    gen-info < rom.bin

Cada argumento es una ruta a una ROM (no hay flags). Sin argumentos se lee
el header desde stdin. Si una ROM no se puede abrir se informa por stderr y
se continúa con la siguiente; el código de salida es siempre 0.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, Sequence, TextIO

from .config import load_settings
from .errors import SourceUnavailableError
from .io import iter_reports, write_report

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gen-info",
        description="Extrae la información del header de ROMs de SEGA Genesis/MD",
        add_help=False,
    )
    parser.add_argument(
        "roms",
        nargs="*",
        help="Rutas a ROMs (.bin, .md, .gen). Sin rutas se lee stdin",
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Función principal de gen-info"""
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        force=True,  # Forzar reconfiguración
    )

    argv = list(sys.argv[1:] if argv is None else argv)
    # "--" delante: cualquier argumento, incluso "-h", es una ruta
    args = _build_parser().parse_args(["--", *argv])

    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer
    stderr = stderr if stderr is not None else sys.stderr

    for report in iter_reports(args.roms, stdin, strict=settings.strict):
        if report.ok:
            write_report(stdout, report.fields)
            stdout.flush()
        elif isinstance(report.error, SourceUnavailableError):
            stderr.write(f"{report.error}\n")
        else:
            stderr.write(f"{report.source}: {report.error}\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
