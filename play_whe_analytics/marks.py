"""Static Play Whe tables: mark names, lines and suits."""

from play_whe_analytics.exceptions import DomainConfigError

MARK_COUNT = 36
LINE_COUNT = 9
SUIT_COUNT = 10

MARK_NAMES: dict[int, str] = {
    1: "Centipede",
    2: "Old Lady",
    3: "Carriage",
    4: "Dead Man",
    5: "Parson Man",
    6: "Belly",
    7: "Hog",
    8: "Tiger",
    9: "Cattle",
    10: "Monkey",
    11: "Corbeau",
    12: "King",
    13: "Crapaud",
    14: "Money",
    15: "Sick Woman",
    16: "Jamette",
    17: "Pigeon",
    18: "Water Boat",
    19: "Horse",
    20: "Dog",
    21: "Mouth",
    22: "Rat",
    23: "House",
    24: "Queen",
    25: "Morrocoy",
    26: "Fowl",
    27: "Little Snake",
    28: "Red Fish",
    29: "Opium Man",
    30: "House Cat",
    31: "Parson Wife",
    32: "Shrimp",
    33: "Spider",
    34: "Blind Man",
    35: "Big Snake",
    36: "Donkey",
}

MARKS: tuple[int, ...] = tuple(range(1, MARK_COUNT + 1))


def line_of(mark: int) -> str:
    """Line label of a mark: 1, 10, 19 and 28 play on "1 Line"."""
    return f"{(mark - 1) % LINE_COUNT + 1} Line"


def suit_of(mark: int) -> str:
    """Suit label of a mark (its last digit)."""
    return str(mark % SUIT_COUNT)


LINE_OF_MARK: dict[int, str] = {m: line_of(m) for m in MARKS}
SUIT_OF_MARK: dict[int, str] = {m: suit_of(m) for m in MARKS}

LINES: tuple[str, ...] = tuple(sorted(set(LINE_OF_MARK.values())))
SUITS: tuple[str, ...] = tuple(sorted(set(SUIT_OF_MARK.values())))


def marks_in_line(line: str) -> list[int]:
    return [m for m in MARKS if LINE_OF_MARK[m] == line]


def marks_in_suit(suit: str) -> list[int]:
    return [m for m in MARKS if SUIT_OF_MARK[m] == suit]


def search_marks(term: str) -> list[int]:
    """Marks whose number or name contains ``term``, case-insensitive."""
    term = term.strip().lower()
    return [
        m for m in MARKS
        if term in str(m) or term in MARK_NAMES[m].lower()
    ]


def validate_domain() -> None:
    """Check the cardinalities quartile bucketing relies on.

    Raises:
        DomainConfigError: if any table does not cover exactly 36 marks,
            9 lines of 4 marks, or 10 suits.
    """
    if sorted(MARK_NAMES) != list(MARKS):
        raise DomainConfigError(f"Mark table must cover 1..{MARK_COUNT}")
    if len(set(MARK_NAMES.values())) != MARK_COUNT:
        raise DomainConfigError("Mark names must be unique")
    if set(LINE_OF_MARK) != set(MARKS) or set(SUIT_OF_MARK) != set(MARKS):
        raise DomainConfigError("Line and suit tables must cover every mark")
    if len(LINES) != LINE_COUNT:
        raise DomainConfigError(f"Expected {LINE_COUNT} lines, got {len(LINES)}")
    if any(len(marks_in_line(line)) != 4 for line in LINES):
        raise DomainConfigError("Every line must hold exactly 4 marks")
    if len(SUITS) != SUIT_COUNT:
        raise DomainConfigError(f"Expected {SUIT_COUNT} suits, got {len(SUITS)}")


validate_domain()
