"""Name comparison that ignores case but keeps accents.

``collation_key("FANTASY") == collation_key("Fantasy")`` while ``"café"`` and
``"cafe"`` stay distinct, which is what a secondary-strength collation does.
"""

import unicodedata


def collation_key(value: str) -> str:
    return unicodedata.normalize("NFC", value).casefold()
