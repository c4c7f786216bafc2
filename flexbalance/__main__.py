# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Allow running as ``python -m flexbalance``."""

import sys

from flexbalance.cli import main

sys.exit(main())
