# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Detects cash entries added to a shift between two snapshots."""

from cashentries.change_detector.detector import detect_new_entries

__all__ = ["detect_new_entries"]
