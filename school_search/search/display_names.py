"""
Display-name mappings used when filtering by level and subject.

Records carry raw curriculum identifiers ("level-1", "mathematics-l1")
while filters are expressed in the display names shown to teachers
("Level I", "Mathematics"). These tables translate one into the other.
"""

from typing import Optional, Tuple


LEVEL_DISPLAY_NAMES = {
    "level-1": "Level I",
    "level-2": "Level II",
    "level-3": "Level III",
}

# Ordered: the first keyword contained in the identifier wins
SUBJECT_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("english", "English Language"),
    ("mathematics", "Mathematics"),
    ("science", "Science and Technology"),
    ("francais", "Français"),
    ("social", "Social Studies"),
    ("vocational", "Vocational Studies"),
    ("arts", "Arts"),
    ("pe", "Physical Education and Sports"),
    ("national", "National Languages and Cultures"),
    ("ict", "Information and Communication Technologies"),
)

LEVELS = tuple(LEVEL_DISPLAY_NAMES.values())

SUBJECTS = tuple(name for _, name in SUBJECT_KEYWORDS)

SYSTEMS = ("anglophone", "francophone")


def level_display_name(level: Optional[str]) -> Optional[str]:
    """
    Map a raw level identifier to its display name.

    Unknown identifiers pass through unchanged; None stays None.
    """
    if level is None:
        return None
    return LEVEL_DISPLAY_NAMES.get(level, level)


def subject_display_name(subject: Optional[str]) -> Optional[str]:
    """
    Map a raw subject identifier to its display name.

    Uses case-insensitive containment against SUBJECT_KEYWORDS in order;
    identifiers matching no keyword pass through unchanged.
    """
    if subject is None:
        return None

    lowered = subject.lower()
    for keyword, display_name in SUBJECT_KEYWORDS:
        if keyword in lowered:
            return display_name

    return subject


if __name__ == "__main__":
    for raw in ("level-1", "level-3", "Level II", "form-1"):
        print(f"{raw!r:>12} -> {level_display_name(raw)!r}")

    for raw in ("english-l1", "mathematics", "francais-l2", "pe-l1", "history"):
        print(f"{raw!r:>14} -> {subject_display_name(raw)!r}")
