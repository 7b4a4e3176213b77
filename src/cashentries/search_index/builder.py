# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""Search index tokens for free-text descriptions.

Firestore has no substring search, so pending entries store a list of
tokens that clients match with ``array-contains``. Tokens are whole words
plus their leading prefixes, weighted toward the first word (usually a
vendor or category):

    word position   longest prefix
    0               10
    1               5
    2 and later     3

Non-leading words under 3 characters contribute only the whole word.
Output is lowercased and de-duplicated, and stops at 35 tokens. When the
text has more than one word, the whole normalized phrase is appended last,
outside the cap.

Example:
    >>> build_search_index("Office Depot Supplies")
    ['office', 'o', 'of', 'off', 'offi', 'offic', 'depot', 'd', 'de', 'dep',
     'depo', 'supplies', 's', 'su', 'sup', 'office depot supplies']
"""

from __future__ import annotations

from cashentries.constants import (
    MAX_INDEX_TOKENS,
    MIN_PREFIXED_WORD_LENGTH,
    PREFIX_CEILINGS,
)

__all__ = ["build_search_index"]


def build_search_index(text: str) -> list[str]:
    """Build ordered, de-duplicated search tokens for ``text``.

    Never raises; blank input yields an empty list.
    """
    words = text.lower().split()
    if not words:
        return []

    tokens: list[str] = []
    seen: set[str] = set()

    def emit(token: str) -> bool:
        """Append ``token`` if new. Returns False once the cap is reached."""
        if len(tokens) >= MAX_INDEX_TOKENS:
            return False
        if token not in seen:
            seen.add(token)
            tokens.append(token)
        return True

    for position, word in enumerate(words):
        if not emit(word):
            break
        if position > 0 and len(word) < MIN_PREFIXED_WORD_LENGTH:
            continue
        ceiling = min(len(word), _prefix_ceiling(position))
        if not all(emit(word[:length]) for length in range(1, ceiling + 1)):
            break

    if len(words) > 1:
        phrase = " ".join(words)
        if phrase not in seen:
            tokens.append(phrase)

    return tokens


def _prefix_ceiling(position: int) -> int:
    return PREFIX_CEILINGS[min(position, len(PREFIX_CEILINGS) - 1)]
