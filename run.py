# -*- coding: utf-8 -*-

"""
Main entry point for launching Word Html Toolkit from a source checkout.
"""

import logging
import sys

from wordhtml.cli import main

if __name__ == '__main__':
    exit_code = main()
    logging.getLogger("wordhtml").info("===== Application terminated =====")
    sys.exit(exit_code)
