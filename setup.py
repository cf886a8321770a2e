# SPDX-License-Identifier: MPL-2.0
"""Setuptools shim for tools that don't support pyproject.toml yet.

All project metadata lives in pyproject.toml.
"""
from setuptools import setup

if __name__ == "__main__":
    setup()
