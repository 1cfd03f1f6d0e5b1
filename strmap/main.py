import argparse
import sys

from .hashing import fnv1a_32, hash_bytes
from .loader import LoadError, load_file
from .shared import printf, printf_err, set_debug_trace_lookup
from .table import NUM_BUCKETS, NotFound, StringMap, create


HASH_FUNCTIONS = {
    "crc32": hash_bytes,
    "fnv1a": fnv1a_32,
}


def repl(m: StringMap):
    while True:
        try:
            inpt = input()
        except EOFError:
            return

        key = inpt.strip()
        if not key:
            continue

        value = m.get(key)
        if isinstance(value, NotFound):
            printf("'{0:s}' not found\n", key)
        else:
            printf("{0:s}\n", value)


def load_files(m: StringMap, filepaths: list[str]):
    for filepath in filepaths:
        try:
            result = load_file(m, filepath)
        except OSError as e:
            printf_err("Could not read file '{0:s}': {1:s}.\n", filepath, e.strerror or str(e))
            sys.exit(66)
        except UnicodeDecodeError:
            printf_err("Could not decode file '{0:s}' as UTF-8.\n", filepath)
            sys.exit(65)

        if isinstance(result, LoadError):
            printf_err("[line {0:d}] Error in {1:s}: {2:s}\n", result.line, filepath, result.message)
            sys.exit(65)


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def get_cla(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="strmap",
        description="Load key/value files, then look up keys read from stdin.",
    )
    parser.add_argument("--buckets", type=positive_int, default=NUM_BUCKETS)
    parser.add_argument("--hash", choices=sorted(HASH_FUNCTIONS), default="crc32")
    parser.add_argument("--trace", action="store_true", help="trace every lookup to stderr")
    parser.add_argument("files", nargs="+", metavar="FILE")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None):
    args = get_cla(argv)
    set_debug_trace_lookup(args.trace)

    with create(args.buckets, HASH_FUNCTIONS[args.hash]) as m:
        load_files(m, args.files)
        repl(m)


if __name__ == "__main__":
    main()
