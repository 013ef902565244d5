import string

ALPHABET = string.ascii_uppercase


def is_letter(char: str) -> bool:
    """True for ASCII letters only."""
    return char in string.ascii_letters


def letter_index(char: str) -> int:
    return ord(char.upper()) - ord("A")


def match_case(letter: str, like: str) -> str:
    """Return ``letter`` in the case of ``like``."""
    return letter.lower() if like.islower() else letter.upper()


def shift_text(text: str, shift: int) -> str:
    """Shift every ASCII letter by ``shift`` keeping case; other characters pass through."""
    result = []
    for char in text:
        if is_letter(char):
            shifted = ALPHABET[(letter_index(char) + shift) % 26]
            result.append(match_case(shifted, char))
        else:
            result.append(char)
    return "".join(result)


def substitute(text: str, cipher_alphabet: str) -> str:
    """Map every ASCII letter through ``cipher_alphabet`` keeping case."""
    result = []
    for char in text:
        if is_letter(char):
            result.append(match_case(cipher_alphabet[letter_index(char)], char))
        else:
            result.append(char)
    return "".join(result)


def is_derangement(cipher_alphabet: str) -> bool:
    return all(plain != cipher for plain, cipher in zip(ALPHABET, cipher_alphabet))


def keyword_alphabet(keyword: str) -> str:
    """Keyword letters with duplicates removed, followed by the unused letters."""
    seen: list[str] = []
    for char in keyword.upper() + ALPHABET:
        if char in ALPHABET and char not in seen:
            seen.append(char)
    return "".join(seen)


def k1_alphabet(keyword: str, offset: int = 0) -> str:
    """K1: the mixed alphabet sits in the plaintext slot over a straight cipher alphabet."""
    mixed = keyword_alphabet(keyword)
    cipher = [""] * 26
    for i, plain in enumerate(mixed):
        cipher[letter_index(plain)] = ALPHABET[(i + offset) % 26]
    return "".join(cipher)


def k2_alphabet(keyword: str, offset: int = 0) -> str:
    """K2: a straight plaintext alphabet over the mixed cipher alphabet."""
    mixed = keyword_alphabet(keyword)
    return "".join(mixed[(i + offset) % 26] for i in range(26))
