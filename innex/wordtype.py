"""Classification of single characters."""


def word_type(word: str) -> str:
    """Return ``"alpha"``, ``"num"`` or ``"other"`` for one character."""
    if len(word) != 1:
        raise ValueError(f"expected a single character, got {word!r}")
    if word.isalpha():
        return "alpha"
    if word.isnumeric():
        return "num"
    return "other"