from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .config import load_config
from .errors import MultiPRError
from .pipeline import run_pipeline


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multi-pr",
        description="Open the same pull request across several repositories of one owner",
    )
    parser.add_argument(
        "--env-file",
        help="Path to a .env file (default: ./.env if present). Process environment values take precedence.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    print("🎆 Multi-repository PR creator starting...")
    print("=" * 50)
    try:
        config = load_config(args.env_file)
        return run_pipeline(config)
    except MultiPRError as e:
        print(f"\n❌ {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n⚠️  Process interrupted by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
