"""
Тесты для компонента TokenProcessor.
"""

import unicodedata

from spanish_prosody.components.tokenizer import TokenProcessor


class TestTokenProcessor:
    """Тесты для TokenProcessor."""

    def test_init(self):
        """Тест инициализации."""
        processor = TokenProcessor()
        assert processor.min_length == 1
        assert processor.lowercase is False

        processor = TokenProcessor(min_length=3, lowercase=True)
        assert processor.min_length == 3
        assert processor.lowercase is True

    def test_tokenize_empty_text(self):
        """Тест токенизации пустого текста."""
        processor = TokenProcessor()
        assert processor.tokenize("") == []
        assert processor.tokenize("   ") == []
        assert processor.tokenize(None) == []

    def test_tokenize_with_punctuation(self):
        """Тест токенизации текста с пунктуацией."""
        processor = TokenProcessor()
        tokens = processor.tokenize("¡Hola! ¿Cómo estás? Bien, gracias.")
        assert tokens == ["Hola", "Cómo", "estás", "Bien", "gracias"]

    def test_symbols_are_removed(self):
        processor = TokenProcessor()
        assert processor.tokenize("precio: 5 € + «oferta»") == ["precio", "5", "oferta"]

    def test_punctuation_inside_word_is_removed(self):
        processor = TokenProcessor()
        assert processor.tokenize("bien-estar") == ["bienestar"]

    def test_whitespace_kinds(self):
        processor = TokenProcessor()
        assert processor.tokenize("uno\tdos\n\ntres  cuatro") == ["uno", "dos", "tres", "cuatro"]

    def test_nfc_normalization(self):
        """Разложенное «ó» собирается в одну кодовую точку."""
        processor = TokenProcessor()
        decomposed = unicodedata.normalize('NFD', "canción")
        assert processor.tokenize(decomposed) == ["canción"]

    def test_keeps_case_by_default(self):
        processor = TokenProcessor()
        assert processor.tokenize("HOLA Mundo") == ["HOLA", "Mundo"]

    def test_lowercase(self):
        processor = TokenProcessor(lowercase=True)
        assert processor.tokenize("HOLA Mundo ESPAÑOL") == ["hola", "mundo", "español"]

    def test_min_length(self):
        processor = TokenProcessor(min_length=3)
        assert processor.tokenize("y el perro come") == ["perro", "come"]

    def test_strip_symbols(self):
        processor = TokenProcessor()
        assert processor.strip_symbols("¿Qué?") == "Qué"
