#!/usr/bin/env python3
"""Run the Progress Step migration with the configuration in the working directory."""

import sys

from clickup_migration.main import main

if __name__ == "__main__":
    sys.exit(main())
