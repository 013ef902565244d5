"""
International Morse Code with the ``x`` separator used by Morse ciphers.

Letters within a word are separated by a single ``x`` and words by ``xx``,
so a Morse string is a sequence over the three symbols ``.``, ``-``, ``x``.
"""

DOT = "."
DASH = "-"
GAP = "x"

MORSE_CODE: dict[str, str] = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
    ".": ".-.-.-", ",": "--..--", "?": "..--..", "'": ".----.", "!": "-.-.--",
    "/": "-..-.", "(": "-.--.", ")": "-.--.-", "&": ".-...", ":": "---...",
    ";": "-.-.-.", "=": "-...-", "+": ".-.-.", "-": "-....-", "_": "..--.-",
    '"': ".-..-.", "$": "...-..-", "@": ".--.-.",
}

_DECODE: dict[str, str] = {code: char for char, code in MORSE_CODE.items()}


def encode_morse(text: str) -> str:
    """Render text as Morse. Characters without a Morse code are dropped."""
    words = []
    for word in text.split():
        codes = [MORSE_CODE[c] for c in word.upper() if c in MORSE_CODE]
        if codes:
            words.append(GAP.join(codes))
    return (GAP * 2).join(words)


def decode_morse(symbols: str) -> str:
    """Read a Morse string back as upper-case text, one space between words."""
    symbols = symbols.strip(GAP)
    if not symbols:
        return ""

    words = []
    for word in symbols.split(GAP * 2):
        letters = []
        for code in word.split(GAP):
            if code not in _DECODE:
                raise ValueError(f"'{code}' is not a Morse code")
            letters.append(_DECODE[code])
        words.append("".join(letters))
    return " ".join(words)
