# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Main entry point for the gim config CLI."""

import sys

if __name__ == "__main__":
    from gim.cli import gim_config

    sys.exit(gim_config())
