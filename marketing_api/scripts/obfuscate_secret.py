"""
Print the obfuscated form of a secret for encrypted-users.json. Run from project root:
  python -m marketing_api.scripts.obfuscate_secret SECRET
  python -m marketing_api.scripts.obfuscate_secret --reveal OBFUSCATED
"""
import argparse
import sys

from marketing_api.core.obfuscation import DecodeError, deobfuscate, obfuscate


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Obfuscate an account secret (reversible, not encryption)."
    )
    parser.add_argument("value", help="Secret to obfuscate, or obfuscated value with --reveal")
    parser.add_argument(
        "--reveal", action="store_true", help="Deobfuscate VALUE instead of obfuscating it"
    )
    args = parser.parse_args(argv)

    if not args.value:
        print("Value must be non-empty.", file=sys.stderr)
        return 1
    if args.reveal:
        try:
            print(deobfuscate(args.value))
        except DecodeError as e:
            print(e.message, file=sys.stderr)
            return 1
        return 0
    print(obfuscate(args.value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
