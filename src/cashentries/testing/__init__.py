# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Test doubles for the external collaborators."""

from cashentries.testing.in_memory_store import InMemoryPendingEntryStore

__all__ = ["InMemoryPendingEntryStore"]
