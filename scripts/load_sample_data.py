#!/usr/bin/env python
import sys

from seeder.cli import main

if __name__ == "__main__":
    sys.exit(main())
