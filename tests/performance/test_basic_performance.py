import time

import pytest

from spanish_prosody.word_analyzer import WordAnalyzer


@pytest.mark.performance
def test_analyse_text_basic_performance(sample_texts):
    """Проверяет, что анализ работает достаточно быстро на простом тексте."""
    analyzer = WordAnalyzer()
    text = sample_texts["simple"] * 200  # Увеличим объём текста

    start = time.perf_counter()
    analyses = analyzer.analyse_text(text)
    duration = time.perf_counter() - start

    assert analyses
    # Базовый грубый порог, чтобы ловить регрессии
    assert duration < 2.0, f"Слишком медленно: {duration:.3f}s"
