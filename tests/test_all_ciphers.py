"""
Comprehensive tests for all cipher engines.
"""
import random

import pytest

from cryptograms.core.exceptions import InvalidKeyError, KeyGenerationError
from cryptograms.models.schemas import CipherType, KeyingMode
from cryptograms.services.engines.alphabet import (
    ALPHABET,
    is_derangement,
    k1_alphabet,
    k2_alphabet,
    keyword_alphabet,
)
from cryptograms.services.engines.keys import (
    KeyOptions,
    KeywordKey,
    MatrixKey,
    MorbitKey,
    PolluxKey,
    SubstitutionKey,
)
from cryptograms.services.engines.monoalphabetic.caesar import CaesarEngine
from cryptograms.services.engines.morse.code import decode_morse, encode_morse
from cryptograms.services.engines.registry import EngineRegistry

SHIFT_BY_ONE = SubstitutionKey("BCDEFGHIJKLMNOPQRSTUVWXYZA")


@pytest.fixture
def registry():
    return EngineRegistry()


class TestCipherRegistry:
    """Test the cipher registry."""

    def test_get_engine_matches_type(self, registry):
        """Verify every cipher type has an engine."""
        for cipher_type in CipherType:
            engine = registry.get_engine(cipher_type)
            assert engine.cipher_type == cipher_type
            assert engine.name
            assert engine.description
            assert engine.key_space

    def test_keyless_ciphers(self, registry):
        keyless = {t for t in CipherType if not registry.get_engine(t).requires_key}

        assert keyless == {CipherType.IDENTITY, CipherType.ROT13}

    def test_second_engine_for_type_is_refused(self):
        class OtherCaesar(CaesarEngine):
            pass

        with pytest.raises(ValueError, match="CaesarEngine"):
            EngineRegistry.register(OtherCaesar)

        assert type(EngineRegistry.get_engine(CipherType.CAESAR)) is CaesarEngine


class TestIdentity:

    def test_unchanged(self, registry):
        engine = registry.get_engine(CipherType.IDENTITY)
        plaintext = "Anything at all, 123!"

        assert engine.encode(plaintext, None) == plaintext
        assert engine.decode(plaintext, None) == plaintext


class TestKeywordAlphabets:
    """Test K1/K2 alphabet construction."""

    def test_keyword_alphabet_removes_duplicates(self):
        assert keyword_alphabet("fortification") == "FORTICANBDEGHJKLMPQSUVWXYZ"

    def test_k2_places_keyword_in_cipher_alphabet(self):
        assert k2_alphabet("ZEBRA") == "ZEBRACDFGHIJKLMNOPQSTUVWXY"

    def test_k1_is_inverse_of_k2(self):
        """K1 puts the same mixed alphabet in the plaintext slot."""
        k1 = SubstitutionKey(k1_alphabet("ZEBRA"))

        assert k1.inverse().alphabet == k2_alphabet("ZEBRA")

    def test_offset_rotates_alignment(self):
        assert k2_alphabet("ZEBRA", 1) == "EBRACDFGHIJKLMNOPQSTUVWXYZ"


class TestAristocrat:
    """Test Aristocrat and Patristocrat engines."""

    @pytest.fixture
    def engine(self, registry):
        return registry.get_engine(CipherType.ARISTOCRAT)

    @pytest.fixture
    def patristocrat(self, registry):
        return registry.get_engine(CipherType.PATRISTOCRAT)

    def test_encode_preserves_spacing(self, engine):
        assert engine.encode("ATTACK AT DAWN", SHIFT_BY_ONE) == "BUUBDL BU EBXO"

    def test_encode_preserves_case_and_punctuation(self, engine):
        assert engine.encode("Attack at dawn!", SHIFT_BY_ONE) == "Buubdl bu ebxo!"

    def test_roundtrip(self, engine):
        key = engine.generate_random_key(random.Random(1), KeyOptions())
        plaintext = "The quick brown fox jumps over the lazy dog. Can't-I'm<>12932."

        assert engine.decode(engine.encode(plaintext, key), key) == plaintext

    def test_generated_keys_are_derangements(self, engine):
        """No generated substitution maps a letter to itself."""
        rng = random.Random(2)
        for _ in range(300):
            key = engine.generate_random_key(rng, KeyOptions())
            assert sorted(key.alphabet) == list(ALPHABET)
            assert all(key.alphabet[i] != ALPHABET[i] for i in range(26))

    @pytest.mark.parametrize("keying", [KeyingMode.K1, KeyingMode.K2])
    def test_keyword_keys_are_derangements(self, engine, keying):
        rng = random.Random(3)
        options = KeyOptions(words=["FORTIFICATION", "ZEBRA", "ABC"], keying=keying)
        for _ in range(100):
            key = engine.generate_random_key(rng, options)
            assert engine.validate_key(key)
            assert is_derangement(key.alphabet)

    def test_keyword_keys_need_words(self, engine):
        with pytest.raises(KeyGenerationError):
            engine.generate_random_key(random.Random(), KeyOptions(keying=KeyingMode.K1))

    def test_parse_key(self, engine):
        assert engine.parse_key(" bcdefghijklmnopqrstuvwxyza ") == SHIFT_BY_ONE

    def test_parse_key_rejects_fixed_point(self, engine):
        with pytest.raises(InvalidKeyError) as exc_info:
            engine.parse_key("BADCFEHGJILKNMPORQTSVUXWYZ")

        assert "derangement" in exc_info.value.constraint

    @pytest.mark.parametrize("text", ["ABC", "AACDEFGHIJKLMNOPQRSTUVWXYZ", ""])
    def test_parse_key_rejects_non_permutation(self, engine, text):
        with pytest.raises(InvalidKeyError) as exc_info:
            engine.parse_key(text)

        assert "permutation" in exc_info.value.constraint

    def test_patristocrat_groups_in_fives(self, patristocrat):
        ciphertext = patristocrat.encode("Attack at dawn!", SHIFT_BY_ONE)

        assert ciphertext == "Buubd lbueb xo"

    def test_patristocrat_drops_everything_but_letters(self, patristocrat):
        key = patristocrat.generate_random_key(random.Random(4), KeyOptions())
        ciphertext = patristocrat.encode("It's 4 o'clock, isn't it?", key)

        assert all(group.isalpha() and len(group) <= 5 for group in ciphertext.split(" "))
        assert patristocrat.decode(ciphertext, key) == "Itsoclockisntit"

    def test_sample_gives_up(self, engine):
        with pytest.raises(KeyGenerationError):
            engine.sample(lambda: 1, lambda candidate: False, 3)


class TestHill:
    """Test Hill cipher engine."""

    @pytest.fixture
    def engine(self, registry):
        return registry.get_engine(CipherType.HILL)

    @pytest.fixture
    def key(self, engine):
        return engine.parse_key("3 3 2 5")

    def test_known_2x2(self, engine, key):
        assert engine.encode("HELP", key) == "HIAT"
        assert engine.decode("HIAT", key) == "HELP"

    def test_known_3x3(self, engine):
        key = engine.parse_key("GYBNQKURP")

        assert key.rows == ((6, 24, 1), (13, 16, 10), (20, 17, 15))
        assert engine.encode("ACT", key) == "POH"
        assert engine.decode("POH", key) == "ACT"

    def test_letter_key_matches_numeric_key(self, engine, key):
        assert engine.parse_key("DDCF") == key
        assert engine.parse_key("3,3,2,5") == key

    def test_drops_non_letters(self, engine, key):
        assert engine.encode("he, lp!", key) == "HIAT"

    def test_pads_final_block(self, engine, key):
        ciphertext = engine.encode("ABC", key)

        assert len(ciphertext) == 4
        assert engine.decode(ciphertext, key) == "ABC"

    def test_plaintext_ending_in_filler(self, engine, key):
        """A trailing Z in the plaintext needs the letter count to survive decoding."""
        ciphertext = engine.encode("QUIZ", key)

        assert engine.decode(ciphertext, key, length=4) == "QUIZ"
        assert engine.decode(engine.encode("QUIZZ", key), key, length=5) == "QUIZZ"

    def test_determinant(self, engine):
        assert engine.determinant(((3, 3), (2, 5))) == 9
        assert engine.determinant(((6, 24, 1), (13, 16, 10), (20, 17, 15))) == 441
        assert engine.determinant(((0, 1), (1, 0))) == -1
        assert engine.determinant(((0, 2, 1), (1, 0, 0), (0, 1, 1))) == -1
        assert engine.determinant(((1, 2), (2, 4))) == 0

    def test_large_key_within_limit(self, engine):
        """A 10 x 10 key is parsed and inverted without cofactor expansion of the determinant."""
        identity = [int(i == j) for i in range(10) for j in range(10)]
        key = engine.parse_key(" ".join(map(str, identity)), KeyOptions(max_matrix_size=10))

        assert key.size == 10
        assert engine.encode("ABCDEFGHIJ", key) == "ABCDEFGHIJ"

    def test_rejects_oversized_matrix(self, engine):
        identity = [int(i == j) for i in range(7) for j in range(7)]

        with pytest.raises(InvalidKeyError) as exc_info:
            engine.parse_key(" ".join(map(str, identity)))

        assert "at most 6 x 6" in exc_info.value.constraint

    def test_size_limit_from_options(self, engine):
        with pytest.raises(InvalidKeyError):
            engine.parse_key("1 0 0 0 0 1 0 0 0 0 1 0 0 0 0 1", KeyOptions(max_matrix_size=3))

        assert engine.parse_key("GYBNQKURP", KeyOptions(max_matrix_size=3)).size == 3

    def test_inverse(self, engine):
        assert engine.matrix_inverse(((3, 3), (2, 5))) == ((15, 17), (20, 9))
        assert engine.matrix_inverse(((2, 4), (1, 2))) is None

    def test_rejects_singular_matrix(self, engine):
        """det = 2*2 - 4*1 = 0 is not coprime with 26."""
        with pytest.raises(InvalidKeyError) as exc_info:
            engine.parse_key("2 4 1 2")

        assert "not invertible" in exc_info.value.constraint

    def test_rejects_even_determinant(self, engine):
        with pytest.raises(InvalidKeyError):
            engine.parse_key("2 0 0 1")

    @pytest.mark.parametrize("text", ["1 2 3", "7", "2 x 1 2", "", "ABCÉ"])
    def test_rejects_malformed(self, engine, text):
        with pytest.raises(InvalidKeyError):
            engine.parse_key(text)

    @pytest.mark.parametrize("size", [2, 3])
    def test_generated_keys_are_invertible(self, engine, size):
        rng = random.Random(5)
        plaintext = "ATTACKATDAWN"
        for _ in range(50):
            key = engine.generate_random_key(rng, KeyOptions(matrix_size=size))
            assert key.size == size
            assert engine.matrix_inverse(key.rows) is not None
            assert engine.decode(engine.encode(plaintext, key), key) == plaintext


class TestMorse:
    """Test Morse rendering shared by Morbit and Pollux."""

    def test_encode(self):
        assert encode_morse("SOS") == "...x---x..."
        assert encode_morse("a b") == ".-xx-..."

    def test_drops_unknown_characters(self):
        assert encode_morse("A# ~") == ".-"

    def test_roundtrip(self):
        assert decode_morse(encode_morse("Hello, World! 42")) == "HELLO, WORLD! 42"

    def test_decode_empty(self):
        assert decode_morse("") == ""
        assert decode_morse("x") == ""


class TestMorbit:
    """Test Morbit cipher engine."""

    @pytest.fixture
    def engine(self, registry):
        return registry.get_engine(CipherType.MORBIT)

    def test_keyword_table(self, engine):
        assert engine.parse_key("MORSECODE") == MorbitKey("568931724")
        assert engine.parse_key("568931724") == MorbitKey("568931724")

    def test_known_ciphertext(self, engine):
        key = engine.parse_key("morsecode")

        assert engine.encode("MORE BITS", key) == "32379749578158"
        assert engine.decode("32379749578158", key) == "MORE BITS"

    def test_roundtrip_generated(self, engine):
        rng = random.Random(6)
        for _ in range(20):
            key = engine.generate_random_key(rng, KeyOptions())
            assert engine.validate_key(key)
            assert engine.decode(engine.encode("Attack at dawn", key), key) == "ATTACK AT DAWN"

    @pytest.mark.parametrize("text", ["12345678", "112345678", "SHORT", "MORSE CODE", ""])
    def test_rejects_malformed(self, engine, text):
        with pytest.raises(InvalidKeyError):
            engine.parse_key(text)


class TestPollux:
    """Test Pollux cipher engine."""

    @pytest.fixture
    def engine(self, registry):
        return registry.get_engine(CipherType.POLLUX)

    @pytest.fixture
    def key(self, engine):
        return engine.parse_key("..--x.-x.-")

    def test_digits_follow_partition(self, engine, key):
        ciphertext = engine.encode("MORE BITS", key)
        symbols = "".join(key.symbols[int(d)] for d in ciphertext)

        assert ciphertext.isdigit()
        assert symbols == encode_morse("MORE BITS")

    def test_roundtrip(self, engine, key):
        assert engine.decode(engine.encode("Attack at dawn", key), key) == "ATTACK AT DAWN"

    def test_deterministic(self, engine, key):
        assert engine.encode("MORE BITS", key) == engine.encode("MORE BITS", key)

    def test_seed_changes_digit_choice_only(self, engine):
        ciphertexts = {
            engine.encode("ATTACK AT DAWN", PolluxKey("..--x.-x.-", seed))
            for seed in range(10)
        }

        assert len(ciphertexts) > 1
        for ciphertext in ciphertexts:
            assert engine.decode(ciphertext, PolluxKey("..--x.-x.-")) == "ATTACK AT DAWN"

    def test_generated_partitions_are_non_empty(self, engine):
        rng = random.Random(7)
        for _ in range(200):
            key = engine.generate_random_key(rng, KeyOptions())
            assert len(key.symbols) == 10
            assert set(key.symbols) == {".", "-", "x"}

    @pytest.mark.parametrize("text", ["..--..--..", "..--x.-x.", "..--x.-x.a", ""])
    def test_rejects_malformed(self, engine, text):
        with pytest.raises(InvalidKeyError):
            engine.parse_key(text)


class TestPorta:
    """Test Porta cipher engine."""

    @pytest.fixture
    def engine(self, registry):
        return registry.get_engine(CipherType.PORTA)

    def test_known_ciphertext(self, engine):
        key = KeywordKey("FORTIFICATION")
        ciphertext = engine.encode("defendtheeastwallofthecastle", key)

        assert ciphertext == "synnjscvrnrlahutukucvryrlany"

    def test_non_letters_do_not_advance_keyword(self, engine):
        assert engine.encode("de fend", KeywordKey("FORTIFICATION")) == "sy nnjs"

    def test_reciprocal(self, engine):
        key = engine.parse_key("zephyr")
        plaintext = "Attack at dawn, 1944!"

        assert engine.encode(engine.encode(plaintext, key), key) == plaintext
        assert engine.decode(plaintext, key) == engine.encode(plaintext, key)

    def test_tableau_rows_are_reciprocal(self, engine):
        for row in range(13):
            for letter in ALPHABET:
                assert engine.tableau(row, engine.tableau(row, letter)) == letter

    def test_generated_key_comes_from_words(self, engine):
        options = KeyOptions(words=["lantern"])

        assert engine.generate_random_key(random.Random(), options) == KeywordKey("LANTERN")

    @pytest.mark.parametrize("text", ["", "   ", "abc1", "two words"])
    def test_rejects_malformed(self, engine, text):
        with pytest.raises(InvalidKeyError):
            engine.parse_key(text)


class TestKeyValidation:
    """Keys of the wrong shape are rejected by every keyed engine."""

    def test_missing_key(self, registry):
        for cipher_type in CipherType:
            engine = registry.get_engine(cipher_type)
            if engine.requires_key:
                assert engine.validate_key(None) is False
                with pytest.raises(InvalidKeyError):
                    engine.encode("HELLO", None)

    def test_mismatched_key_type(self, registry):
        hill = registry.get_engine(CipherType.HILL)

        assert hill.validate_key(KeywordKey("HELLO")) is False
        assert registry.get_engine(CipherType.PORTA).validate_key(MatrixKey(((1, 0), (0, 1)))) is False
