# SPDX-License-Identifier: MIT
"""Command line interface for semver_order."""

__version__ = "0.1.0"
