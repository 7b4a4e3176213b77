# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Prefix search tokens for pending entry descriptions."""

from cashentries.search_index.builder import build_search_index

__all__ = ["build_search_index"]
