#!/usr/bin/env python
"""Entry point for running the HTTP server."""

import sys

from calendar_api.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
