"""Interactive menu-driven editor that saves and opens .cez files."""

from __future__ import annotations

import argparse
import re
import sys
import time
import zlib
from typing import TextIO

from .cezformat import ChecksumError, InvalidFileError, build_container, split_container
from .fileio import read_file, write_file
from .gapbuffer import GapBuffer

DEFAULT_FILENAME = "documento.cez"
MENU = (
    "\n[1]Escribir [2]Borrar [3]Ver [4]Guardar [5]Abrir [6]Renombrar [0]Salir\n"
    "Opción: "
)
_OPTION_RE = re.compile(r"\s*([+-]?\d+)")


def _save_file(gb: GapBuffer, path: str, out: TextIO) -> bool:
    text = str(gb).encode("utf-8")
    compressed = zlib.compress(text)
    container = build_container(compressed, len(text), path, int(time.time()))
    try:
        write_file(path, container)
    except OSError as exc:
        print(f"write: {exc}", file=sys.stderr)
        return False
    print(
        f"Guardado: {path} ({len(container)} bytes en disco, original: {len(text)} bytes)",
        file=out,
    )
    return True


def _open_file(gb: GapBuffer, path: str, out: TextIO) -> bool:
    try:
        raw = read_file(path)
    except OSError as exc:
        print(f"open read: {exc}", file=sys.stderr)
        return False
    try:
        header, payload = split_container(raw)
    except ChecksumError:
        print("Error: CRC32 no coincide — archivo corrupto", file=sys.stderr)
        return False
    except InvalidFileError:
        print("Archivo CEZ inválido", file=sys.stderr)
        return False
    try:
        text = zlib.decompress(payload)
    except zlib.error as exc:
        print(f"decompress: {exc}", file=sys.stderr)
        return False
    gb.insert_text(text.decode("utf-8", errors="replace"))
    print(f"Abierto: {path} ({header.original_size} bytes)", file=out)
    return True


def _display(gb: GapBuffer, out: TextIO) -> None:
    text = str(gb)
    print(f"\n--- Contenido ({len(text)} chars) ---\n{text}\n---", file=out)


def _read_option(infile: TextIO) -> int | None:
    for line in infile:
        if not line.strip():
            continue
        match = _OPTION_RE.match(line)
        return int(match.group(1)) if match else None
    return None


def run_session(infile: TextIO, outfile: TextIO) -> None:
    """Run the editor menu, reading commands from infile until exit or EOF."""
    gb = GapBuffer()
    filename = DEFAULT_FILENAME
    print(f"=== Editor CEZ ===\nArchivo: {filename}", file=outfile)

    while True:
        outfile.write(MENU)
        option = _read_option(infile)
        if option is None:
            break
        if option == 1:
            print("Texto (Enter para terminar):", file=outfile)
            line = infile.readline()
            if line:
                gb.insert_text(line)
        elif option == 2:
            try:
                gb.delete()
            except IndexError:
                print("Nada que borrar.", file=outfile)
            else:
                print("Borrado.", file=outfile)
        elif option == 3:
            _display(gb, outfile)
        elif option == 4:
            _save_file(gb, filename, outfile)
        elif option == 5:
            gb = GapBuffer()
            _open_file(gb, filename, outfile)
        elif option == 6:
            outfile.write("Nuevo nombre: ")
            line = infile.readline()
            if line:
                filename = line.split("\n", 1)[0]
        elif option == 0:
            break
        else:
            print("Opción inválida.", file=outfile)

    print("saliendo", file=outfile)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive editor on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="cezedit", description="Interactive editor for .cez files."
    )
    parser.parse_args(argv)
    run_session(sys.stdin, sys.stdout)
    return 0