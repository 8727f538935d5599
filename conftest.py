"""Test configuration so ``citizen_connect`` imports without installation."""

import os
import sys

# Running ``pytest`` from a checkout should behave like ``python -m pytest``,
# which puts the working directory on the import path.
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)
