import re

# Separators accepted between course numbers in a typed or tabular list
LIST_SPLIT = re.compile(r'[,\n;]+')


def normalize_code(raw) -> str | None:
    """
    Trims a user-supplied course number. Casing is left alone: lookups fold
    case themselves, and the original spelling is what gets displayed back.
    Returns None for None, empty or whitespace-only input.
    """
    if raw is None:
        return None
    code = str(raw).strip()
    return code or None


def split_codes(raw_str) -> list[str]:
    """
    Splits a comma/semicolon/newline separated list of course numbers.

    "CSCI200; MATH201" -> ["CSCI200", "MATH201"]
    Empty tokens are dropped; order and duplicates are kept.
    """
    if raw_str is None or not str(raw_str).strip():
        return []
    codes = []
    for token in LIST_SPLIT.split(str(raw_str)):
        code = normalize_code(token)
        if code:
            codes.append(code)
    return codes
