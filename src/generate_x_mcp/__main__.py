#!/usr/bin/env python3
"""Allow ``python -m generate_x_mcp``."""

from .cli import main

if __name__ == "__main__":
    main()
