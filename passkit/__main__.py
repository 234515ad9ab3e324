#!/usr/bin/env python3
"""Allow running as: python -m passkit"""

import sys

from passkit.cli import main

sys.exit(main())
