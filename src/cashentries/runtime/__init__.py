# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Function runtime: settings, logging and the CloudEvent entry point.

The entry point lives in ``cashentries.runtime.function`` and is not
re-exported here, so importing settings does not pull in the framework.
"""

from cashentries.runtime.settings import (
    CashEntriesSettings,
    configure_logging,
    get_settings,
)

__all__ = ["CashEntriesSettings", "configure_logging", "get_settings"]
