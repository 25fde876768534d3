import re

from string_analyzer.models import FilterSpec

LONGER_THAN = re.compile(r"longer than (\d+)")
SHORTER_THAN = re.compile(r"shorter than (\d+)")
LETTER = re.compile(r"letter ([a-z])")
VOWEL = re.compile(r"vowel ([aeiou])")

# Checked in order, first hit wins
WORD_COUNT_PHRASES = (
    ("single word", 1),
    ("two word", 2),
    ("three word", 3),
)


def parse_natural_language_query(query: str) -> FilterSpec:
    """
    Parse natural language query into a FilterSpec.

    Examples:
    - "all single word palindromic strings" -> word_count=1, is_palindrome=True
    - "strings longer than 10 characters" -> min_length=11
    - "strings that contain the letter z" -> contains_character="z"

    Unrecognised queries give an empty FilterSpec. No consistency checks
    are made here; an inverted length range is returned as parsed.
    """
    query = query.lower()

    is_palindrome = None
    word_count = None
    min_length = None
    max_length = None
    contains_character = None

    if "palindrome" in query or "palindromic" in query:
        is_palindrome = True

    for phrase, count in WORD_COUNT_PHRASES:
        if phrase in query:
            word_count = count
            break

    longer_match = LONGER_THAN.search(query)
    if longer_match:
        min_length = int(longer_match.group(1)) + 1

    shorter_match = SHORTER_THAN.search(query)
    if shorter_match:
        max_length = int(shorter_match.group(1)) - 1

    if "contain" in query and "letter" in query:
        letter_match = LETTER.search(query)
        if letter_match:
            contains_character = letter_match.group(1)

    # "first vowel" overrides any letter picked above
    if "first vowel" in query:
        contains_character = "a"
    elif "vowel" in query:
        vowel_match = VOWEL.search(query)
        if vowel_match:
            contains_character = vowel_match.group(1)

    return FilterSpec(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )
