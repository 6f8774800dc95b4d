#!/usr/bin/env python3
"""
UTR Player Search CLI

Search the Universal Tennis Rating service for a player, pick among
matching names, and browse that player's match results in the terminal.

Usage:
    python utr_search.py
    python utr_search.py "Roger Federer"
    python utr_search.py "Roger Federer" --debug --log-dir /tmp/utr-logs
"""

import sys

from utr.cli import main

if __name__ == "__main__":
    sys.exit(main())
