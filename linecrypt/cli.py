"""
Command-line interface.

    linecrypt encrypt INPUT OUTPUT [--key KEY]
    linecrypt decrypt INPUT OUTPUT [--key KEY]
    linecrypt menu
    linecrypt serve
"""

import argparse
import getpass
import re
import sys
from typing import Callable

from linecrypt.core.exceptions import LinecryptError
from linecrypt.models.schemas import CipherDirection
from linecrypt.services.processing.line_processor import LineProcessor

CHOICE_PATTERN = re.compile(r"\s*([+-]?\d+)")


def process(
    input_path: str,
    output_path: str,
    key: str,
    direction: CipherDirection,
) -> bool:
    """Process a file, printing any error to stderr. Returns True on success."""
    processor = LineProcessor()
    try:
        processor.process_file(input_path, output_path, key, direction)
    except LinecryptError as e:
        print(f"{e.message}.", file=sys.stderr)
        return False
    return True


def menu(prompt: Callable[[str], str] = input) -> int:
    """Interactive encrypt/decrypt menu."""
    print("=== Simple File Encrypt/Decrypt ===")
    print("1) Encrypt a file")
    print("2) Decrypt a file")

    # Only the leading integer counts; a missing or non-numeric choice quits quietly
    try:
        match = CHOICE_PATTERN.match(prompt("Choose: "))
    except EOFError:
        return 0
    if match is None:
        return 0
    choice = int(match.group(1))

    def ask(text: str) -> str:
        try:
            return prompt(text)
        except EOFError:
            return ""

    input_path = ask("Enter input file name: ")
    output_path = ask("Enter output file name: ")
    key = ask("Enter key (string): ")

    if choice == 1:
        ok = process(input_path, output_path, key, CipherDirection.ENCRYPT)
    elif choice == 2:
        ok = process(input_path, output_path, key, CipherDirection.DECRYPT)
    else:
        print("Invalid choice.", file=sys.stderr)
        return 1

    print("Done." if ok else "Failed.")
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="linecrypt",
        description="Encrypt or decrypt a text file line by line.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    for direction in CipherDirection:
        cmd = sub.add_parser(direction.value, help=f"{direction.value} a file")
        cmd.add_argument("infile")
        cmd.add_argument("outfile")
        cmd.add_argument("--key", help="Key (string); prompted for if omitted")

    sub.add_parser("menu", help="interactive menu")
    sub.add_parser("serve", help="run the HTTP API")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "menu":
        return menu()

    if args.command == "serve":
        from linecrypt.main import run

        run()
        return 0

    direction = CipherDirection(args.command)
    key = args.key if args.key is not None else getpass.getpass("Key: ")
    if not process(args.infile, args.outfile, key, direction):
        return 1

    print(f"{direction.value.capitalize()}ed ->", args.outfile)
    return 0


if __name__ == "__main__":
    sys.exit(main())
