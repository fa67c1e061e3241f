# filename: huffman_cli.py
"""
Command-line front end for the Huffman engine.

Reads text from the command line, a file, or stdin, and prints the encoded
bitstring followed by the symbol -> code table.

Run with:
    huffman-encode "abacabad"
    huffman-encode --file notes.txt --json
"""
import argparse
import json
import logging
import sys

from huffman_core import EmptyInput
from huffman_service import HuffmanService


def read_input(args, stdin=None):
    """Pick the text to encode: positional argument, then --file, then stdin."""
    if args.text is not None:
        return args.text
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            return f.read()
    stdin = stdin if stdin is not None else sys.stdin
    return stdin.read()


def format_table(result):
    rows = [f"{'Symbol':<8}{'Code':<20}Count"]
    # frequencies keep first-occurrence order
    for symbol, count in result.frequencies.items():
        rows.append(f"{symbol!r:<8}{result.codes[symbol]:<20}{count}")
    return "\n".join(rows)


def format_report(result):
    return "\n".join([
        "Encoded:",
        result.encoded,
        "",
        "Huffman Codes:",
        format_table(result),
        "",
        f"{result.symbol_count} symbols -> {result.bit_length} bits "
        f"({result.average_code_length:.3f} bits/symbol)",
    ])


def to_json(result):
    return json.dumps({
        "encoded": result.encoded,
        "codes": result.codes,
        "frequencies": result.frequencies,
        "bit_length": result.bit_length,
    }, indent=2, ensure_ascii=False)


def build_parser():
    parser = argparse.ArgumentParser(description="Huffman-encode a piece of text")
    parser.add_argument("text", nargs="?", default=None, help="Text to encode (default: read stdin)")
    parser.add_argument("--file", type=str, default=None, help="Read UTF-8 text from this file")
    parser.add_argument("--json", action="store_true", help="Emit a JSON document instead of a table")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None, stdin=None, stdout=None, stderr=None):
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig()
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        text = read_input(args, stdin=stdin)
    except OSError as e:
        print(f"huffman-encode: cannot read input: {e}", file=stderr)
        return 2

    try:
        result = HuffmanService().compress(text)
    except EmptyInput:
        print("Please enter some text.", file=stderr)
        return 1

    print(to_json(result) if args.json else format_report(result), file=stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
