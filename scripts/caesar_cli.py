#!/usr/bin/env python3
"""caesar_cli.py — encrypt, decrypt, analyze and brute-force Caesar files.

Usage:
    python scripts/caesar_cli.py encrypt <src> [dst]   # writes <src>.enc by default
    python scripts/caesar_cli.py decrypt <src> [dst]   # writes <src>.dec by default
    python scripts/caesar_cli.py analize <src>         # writes freq.txt
    python scripts/caesar_cli.py brute <src> [dst]     # recovers the shift, writes <src>.dec

Options (after the verb):
    --config PATH       configuration file (default: $CAESAR_CONFIG or caesar.cfg)
    --freq PATH         frequency table file (default: $CAESAR_FREQ or freq.txt)
    --shift N           override the configured shift for encrypt/decrypt
    --sample-size N     override the number of symbols examined by brute
"""
import argparse
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))
from caesar_io import (CONFIG_NAME, FREQ_NAME, load_config, load_frequency_table,
                       save_frequency_table)
from cipher import decrypt_file, encrypt_file
from cracker import recover_file_shift
from frequency import analyze_file

USAGE = "Arguments: <encrypt|decrypt|analize|brute> <source file> [dest file]"
VERBS = ("encrypt", "decrypt", "analize", "brute")
ALIASES = {"analyze": "analize"}


def default_output(src: str, verb: str) -> str:
    """Destination used when none is given: <src>.enc or <src>.dec."""
    return f"{src}.{'enc' if verb == 'encrypt' else 'dec'}"


# ── Commands ─────────────────────────────────────────────────────────

def cmd_encrypt(args, config) -> int:
    dst = args.dst or default_output(args.src, "encrypt")
    count = encrypt_file(args.src, dst, config.alphabet, config.shift)
    print(f"encrypted: {count}")
    return 0


def cmd_decrypt(args, config) -> int:
    dst = args.dst or default_output(args.src, "decrypt")
    count = decrypt_file(args.src, dst, config.alphabet, config.shift)
    print(f"decrypted: {count}")
    return 0


def cmd_analize(args, config) -> int:
    table = analyze_file(args.src, config.alphabet)
    save_frequency_table(args.freq, table, config.alphabet)
    # Echo what was persisted, not what was computed
    saved = load_frequency_table(args.freq, config.alphabet)
    for symbol, value in zip(config.alphabet, saved):
        print(f"{symbol} {value}")
    print(f"sum = {sum(saved)}")
    return 0


def cmd_brute(args, config) -> int:
    reference = load_frequency_table(args.freq, config.alphabet)
    result = recover_file_shift(args.src, reference, config.alphabet, config.sample_size)
    print(f"matched shift = {result.shift}, min distance = {result.distance}")
    if not result.matched:
        print("Can't find matched shift")
        return 1
    dst = args.dst or default_output(args.src, "brute")
    count = decrypt_file(args.src, dst, config.alphabet, result.shift)
    print(f"decrypted: {count}")
    return 0


COMMANDS = {
    "encrypt": cmd_encrypt,
    "decrypt": cmd_decrypt,
    "analize": cmd_analize,
    "brute": cmd_brute,
}


# ── CLI ──────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="caesar", description="Caesar shift cipher tool",
                                     allow_abbrev=False)
    parser.add_argument("command", choices=VERBS, help="What to do with the source file")
    parser.add_argument("src", help="Source file")
    parser.add_argument("dst", nargs="?", help="Destination file")
    parser.add_argument("--config", default=os.environ.get("CAESAR_CONFIG", CONFIG_NAME),
                        help="Configuration file")
    parser.add_argument("--freq", default=os.environ.get("CAESAR_FREQ", FREQ_NAME),
                        help="Frequency table file")
    parser.add_argument("--shift", type=int, help="Shift to use instead of the configured one")
    parser.add_argument("--sample-size", type=int, help="Symbols examined when brute forcing")
    return parser


def normalize_verb(verb: str) -> str:
    verb = verb.lower()
    return ALIASES.get(verb, verb)


def positional_indexes(argv: list) -> list:
    """Indexes of the positional arguments in argv.

    Every option takes a value, so `--name value` consumes the next
    argument unless written as `--name=value`.
    """
    indexes = []
    skip = False
    for i, arg in enumerate(argv):
        if skip:
            skip = False
        elif arg.startswith("--"):
            skip = "=" not in arg and arg != "--help"
        else:
            indexes.append(i)
    return indexes


def main(argv=None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    positional = positional_indexes(argv)
    if len(positional) < 2:
        print(USAGE)
        return 0
    argv[positional[0]] = normalize_verb(argv[positional[0]])

    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        if args.shift is not None:
            config = config.with_shift(args.shift)
        if args.sample_size is not None:
            if args.sample_size <= 0:
                print("Error: --sample-size must be positive", file=sys.stderr)
                return 1
            config = config._replace(sample_size=args.sample_size)
        duplicates = config.alphabet.duplicates()
        if duplicates:
            print(f"Warning: alphabet repeats {''.join(duplicates)!r}; first occurrence wins",
                  file=sys.stderr)
        return COMMANDS[args.command](args, config)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
