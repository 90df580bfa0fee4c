#!/usr/bin/env python3
"""
Terminal Analog Clock
A live analog clock face drawn with colored block characters
"""

import sys

from analog_clock.cli import main

if __name__ == "__main__":
    sys.exit(main())
