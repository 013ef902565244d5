import math
import random
import re
from typing import ClassVar

from cryptograms.models.schemas import CipherType
from cryptograms.services.engines.alphabet import ALPHABET, is_letter
from cryptograms.services.engines.base import CipherEngine
from cryptograms.services.engines.keys import Key, KeyOptions, MatrixKey
from cryptograms.services.engines.registry import EngineRegistry

Matrix = tuple[tuple[int, ...], ...]


@EngineRegistry.register
class HillEngine(CipherEngine):
    """
    Hill cipher engine.

    The Hill cipher uses matrix multiplication for encryption.
    Plaintext is divided into vectors of length n, and each vector
    is multiplied by an n x n key matrix modulo 26.

    For a 2x2 matrix:
    [a b]   [p1]   [a*p1 + b*p2]
    [c d] x [p2] = [c*p1 + d*p2] (mod 26)

    The key matrix must be invertible modulo 26, i.e. its determinant must
    be coprime with 26. A short final block is padded with Z.
    """

    name = "Hill Cipher"
    cipher_type = CipherType.HILL
    description = (
        "A polygraphic cipher using linear algebra. "
        "Blocks of letters are encrypted by multiplying with a key matrix. "
        "The key matrix must be invertible modulo 26."
    )
    key_space = "an n x n matrix mod 26 whose determinant is coprime with 26"

    FILLER: ClassVar[str] = "Z"
    MIN_SIZE: ClassVar[int] = 2

    def encode(self, plaintext: str, key: Key) -> str:
        """Encrypt using the key matrix."""
        self.check_key(key)
        return self._multiply_blocks(self._letters(plaintext, key.size), key.rows)

    def decode(self, ciphertext: str, key: Key, length: int | None = None) -> str:
        """
        Decrypt with the inverse matrix and remove the padding.

        ``length`` is the number of plaintext letters. Without it, trailing
        Z's in the last block are taken to be padding, so a plaintext that
        itself ends in Z needs ``length`` to come back whole.
        """
        self.check_key(key)
        inverse = self.matrix_inverse(key.rows)
        letters = self._multiply_blocks(self._letters(ciphertext, key.size), inverse)

        if length is not None:
            return letters[:length]

        padding = min(len(letters) - len(letters.rstrip(self.FILLER)), key.size - 1)
        return letters[:len(letters) - padding]

    def generate_random_key(self, rng: random.Random, options: KeyOptions) -> MatrixKey:
        """Generate a random invertible key matrix."""
        n = options.matrix_size

        def draw() -> MatrixKey:
            return MatrixKey(tuple(
                tuple(rng.randrange(26) for _ in range(n))
                for _ in range(n)
            ))

        return self.sample(draw, self.validate_key, options.max_attempts)

    def parse_key(self, text: str, options: KeyOptions | None = None) -> MatrixKey:
        """
        Parse a key matrix in row-major order.

        Accepts integers separated by whitespace or commas ("3 3 2 5"), or a
        run of letters with A=0 ... Z=25 ("DDCF"). The matrix may be at most
        ``options.max_matrix_size`` wide.
        """
        max_size = (options or KeyOptions()).max_matrix_size

        tokens = [t for t in re.split(r"[\s,]+", text.strip()) if t]
        if len(tokens) == 1 and tokens[0].isalpha():
            values = [ALPHABET.index(c) for c in tokens[0].upper() if c.upper() in ALPHABET]
            if len(values) != len(tokens[0]):
                raise self.invalid_key("letter keys may only use A-Z")
        else:
            try:
                values = [int(t) for t in tokens]
            except ValueError:
                raise self.invalid_key("matrix entries must be integers or letters")

        n = math.isqrt(len(values))
        if n < self.MIN_SIZE or n * n != len(values):
            raise self.invalid_key(
                f"{len(values)} entries do not form a square matrix of size 2 or more"
            )
        if n > max_size:
            raise self.invalid_key(f"matrix is {n} x {n}; at most {max_size} x {max_size} is allowed")

        rows = tuple(
            tuple(v % 26 for v in values[i * n:(i + 1) * n])
            for i in range(n)
        )
        return self.check_key(MatrixKey(rows))

    def key_violation(self, key: Key) -> str | None:
        if not isinstance(key, MatrixKey):
            return "expected a matrix"
        n = key.size
        if n < self.MIN_SIZE or any(len(row) != n for row in key.rows):
            return "matrix must be square with size 2 or more"
        det = self.determinant(key.rows) % 26
        if math.gcd(det, 26) != 1:
            return f"matrix is not invertible: determinant {det} is not coprime with 26"
        return None

    @staticmethod
    def determinant(matrix: Matrix) -> int:
        """Integer determinant by fraction-free (Bareiss) row reduction."""
        m = [list(row) for row in matrix]
        n = len(m)
        sign = 1
        previous = 1

        for k in range(n - 1):
            if m[k][k] == 0:
                pivot = next((i for i in range(k + 1, n) if m[i][k] != 0), None)
                if pivot is None:
                    return 0
                m[k], m[pivot] = m[pivot], m[k]
                sign = -sign
            for i in range(k + 1, n):
                for j in range(k + 1, n):
                    # Exact: Bareiss guarantees divisibility by the previous pivot
                    m[i][j] = (m[i][j] * m[k][k] - m[i][k] * m[k][j]) // previous
            previous = m[k][k]

        return sign * m[n - 1][n - 1]

    @classmethod
    def matrix_inverse(cls, matrix: Matrix) -> Matrix | None:
        """Inverse modulo 26 via the adjugate, or None if not invertible."""
        n = len(matrix)
        det = cls.determinant(matrix) % 26
        if math.gcd(det, 26) != 1:
            return None
        det_inv = pow(det, -1, 26)

        if n == 2:
            (a, b), (c, d) = matrix
            adjugate = ((d, -b), (-c, a))
        else:
            # adj[i][j] is the (j, i) cofactor
            adjugate = tuple(
                tuple(
                    (-1) ** (i + j) * cls.determinant(cls._minor(matrix, j, i))
                    for j in range(n)
                )
                for i in range(n)
            )

        return tuple(
            tuple((value * det_inv) % 26 for value in row)
            for row in adjugate
        )

    @staticmethod
    def _minor(matrix: Matrix, row: int, col: int) -> Matrix:
        return tuple(
            tuple(v for j, v in enumerate(r) if j != col)
            for i, r in enumerate(matrix)
            if i != row
        )

    def _letters(self, text: str, n: int) -> str:
        """Upper-case letters of ``text``, padded to a multiple of ``n``."""
        letters = "".join(c.upper() for c in text if is_letter(c))
        if len(letters) % n:
            letters += self.FILLER * (n - len(letters) % n)
        return letters

    def _multiply_blocks(self, letters: str, matrix: Matrix) -> str:
        """Multiply each n-letter column vector by the matrix mod 26."""
        n = len(matrix)
        result = []
        for i in range(0, len(letters), n):
            block = [ALPHABET.index(c) for c in letters[i:i + n]]
            for row in matrix:
                val = sum(row[j] * block[j] for j in range(n)) % 26
                result.append(ALPHABET[val])

        return "".join(result)
