#!/usr/bin/env python3
"""
Resolve secret references against a live Secret Manager project.

Useful for checking credentials and prefix configuration before wiring the
resolver into a configuration loader. Values are masked unless --show is given.

Run with: python resolve_references.py [--show] REFERENCE [REFERENCE ...]
"""

import os
import sys
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from services.errors import SecretSourceError
from services.secret_source import GcpSecretManagerSecretSource


def main(argv: list[str]) -> int:
    show = "--show" in argv
    references = [arg for arg in argv if arg != "--show"]
    if not references:
        print(__doc__.strip())
        return 2

    source = GcpSecretManagerSecretSource()
    print(f"Prefix: {source.prefix}")
    print()

    failures = 0
    for reference in references:
        try:
            value = source.reveal(reference)
        except SecretSourceError as e:
            failures += 1
            print(f"  ERROR [{e.kind.value}] {reference}: {e}")
            continue

        if value is None:
            print(f"  SKIP  {reference} (no prefix match)")
        else:
            shown = value if show else "*" * min(len(value), 8)
            print(f"  OK    {reference} = {shown}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
