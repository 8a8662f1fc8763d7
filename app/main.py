#!/usr/bin/env python3
"""
Multi-repository PR creator

Thin entrypoint that delegates to the modular package in `app/multipr/`.
"""
from __future__ import annotations

import sys

from multipr.cli import main


if __name__ == "__main__":
    sys.exit(main())
