import string

# Only the classic ASCII letters are folded; everything else compares as-is.
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold_ascii(text: str) -> str:
    """Lower-case ASCII letters of text, leaving every other character untouched."""
    return text.translate(_ASCII_FOLD)


def compare_ci(a: str, b: str) -> int:
    """
    Compare two strings case-insensitively.

    Args:
        a: Left-hand text
        b: Right-hand text

    Returns:
        -1 if a sorts before b, 0 if they are equal ignoring ASCII case,
        1 if a sorts after b. A strict prefix sorts before the longer string.
    """
    folded_a = fold_ascii(a)
    folded_b = fold_ascii(b)
    if folded_a == folded_b:
        return 0
    return -1 if folded_a < folded_b else 1
