# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Cloud Functions source entry point.

functions-framework loads ``main.py`` from the source root; the function
itself lives in the installed package.
"""

from cashentries.runtime.function import detect_cash_entries_changes

__all__ = ["detect_cash_entries_changes"]
