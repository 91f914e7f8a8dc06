#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""MRU combo box demo entry point for running the checkout directly."""

import sys
import os

package_dir = os.path.dirname(os.path.abspath(__file__))
if package_dir not in sys.path:
    sys.path.insert(0, package_dir)

from mrucombo.demo import main as app_main


def main():
    """Entry point wrapper."""
    return app_main(sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
