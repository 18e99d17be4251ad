"""
Тесты для классификации букв испанского алфавита.
"""

import pytest
from spanish_prosody.components.alphabet import (
    is_vowel,
    is_consonant,
    is_consonant_cluster,
    has_vowels,
    has_consonants,
)


class TestVowels:
    """Тесты для is_vowel."""

    @pytest.mark.parametrize("ch", list("aeiouáéíóúAEIOUÁÉÍÓÚ"))
    def test_spanish_vowels(self, ch):
        assert is_vowel(ch) is True

    @pytest.mark.parametrize("ch", ["y", "ñ", "ü", "1", "!", " ", ""])
    def test_not_vowels(self, ch):
        assert is_vowel(ch) is False

    def test_any_character_of_slice(self):
        """Для фрагмента достаточно одной гласной."""
        assert has_vowels("tr") is False
        assert has_vowels("tra") is True
        assert has_vowels("üi") is True


class TestConsonants:
    """Тесты для is_consonant."""

    @pytest.mark.parametrize("ch", ["b", "ñ", "Ñ", "y", "Y", "z", "W"])
    def test_spanish_consonants(self, ch):
        assert is_consonant(ch) is True

    @pytest.mark.parametrize("ch", ["a", "á", "ü", "ç", "5", "-", ""])
    def test_not_consonants(self, ch):
        assert is_consonant(ch) is False

    def test_any_character_of_slice(self):
        assert has_consonants("ia") is False
        assert has_consonants("güi") is True


class TestConsonantClusters:
    """Тесты для is_consonant_cluster."""

    @pytest.mark.parametrize("pair", ["tr", "bl", "ch", "ll", "rr", "ps", "gn", "fl"])
    def test_clusters(self, pair):
        assert is_consonant_cluster(pair) is True

    def test_case_insensitive(self):
        assert is_consonant_cluster("TR") is True
        assert is_consonant_cluster("Ch") is True

    @pytest.mark.parametrize("pair", ["st", "nt", "mn", "t", "tra", ""])
    def test_not_clusters(self, pair):
        assert is_consonant_cluster(pair) is False
