# SPDX-License-Identifier: MIT
"""CLI commands for semver-order."""
