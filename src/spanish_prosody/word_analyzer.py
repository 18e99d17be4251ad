"""
Модуль для анализа испанских слов

Предоставляет функциональность для:
- Деления слова на слоги
- Определения ударного слога и типа слова по месту ударения
- Пакетного анализа списка слов и произвольного текста
- Сводной статистики по типам слов
"""

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional
import logging

from .config import config, ON_ERROR_POLICIES
from .components.alphabet import has_consonants, has_vowels
from .components.stress import classify_word, locate_tonic_index
from .components.syllabifier import split_syllables
from .components.tokenizer import TokenProcessor
from .exceptions import InvalidInputError
from .interfaces.word_processor import WordAnalysis, WordAnalyzerInterface

logger = logging.getLogger(__name__)


def analyze_word(word: str) -> WordAnalysis:
    """
    Анализирует одно слово.

    Пробелы по краям не удаляются: это задача токенизатора.

    Args:
        word: Слово в испанской орфографии

    Returns:
        Неизменяемый результат анализа

    Raises:
        InvalidInputError: если слово — пустая строка
    """
    if word == '':
        raise InvalidInputError("Слово для анализа не должно быть пустой строкой")

    syllables = split_syllables(word)
    tonic_index = locate_tonic_index(word, syllables)

    return WordAnalysis(
        value=word,
        syllables=tuple(syllables),
        tonic_syllable=syllables[tonic_index] if syllables else None,
        tonic_syllable_index=tonic_index,
        vowels=tuple(letter for letter in word if has_vowels(letter)),
        consonants=tuple(letter for letter in word if has_consonants(letter)),
        type=classify_word(len(syllables), tonic_index),
    )


class WordAnalyzer(WordAnalyzerInterface):
    """Класс для пакетного анализа испанских слов"""

    def __init__(self,
                 workers: Optional[int] = None,
                 on_error: Optional[str] = None,
                 lowercase: Optional[bool] = None,
                 tokenizer: Optional[TokenProcessor] = None):
        """
        Инициализация анализатора

        Args:
            workers: Количество потоков (по умолчанию из config)
            on_error: 'raise' или 'skip' (по умолчанию из config)
            lowercase: Приводить ли слова к нижнему регистру
            tokenizer: Токенизатор для analyse_text
        """
        self.workers = max(1, config.get_batch_workers() if workers is None else workers)
        self.on_error = on_error or config.get_batch_on_error()
        if self.on_error not in ON_ERROR_POLICIES:
            raise ValueError(f"on_error должен быть одним из {ON_ERROR_POLICIES}, получено: {self.on_error!r}")
        if lowercase is None:
            lowercase = config.is_lowercase_enabled()
        self.tokenizer = tokenizer or TokenProcessor(
            min_length=config.get_min_word_length(),
            lowercase=lowercase,
        )

    def analyze_word(self, word: str) -> WordAnalysis:
        """Анализирует одно слово."""
        return analyze_word(word)

    def _analyze_or_skip(self, word: str) -> Optional[WordAnalysis]:
        try:
            return analyze_word(word)
        except InvalidInputError as e:
            if self.on_error == 'raise':
                raise
            logger.warning(f"Слово пропущено ({word!r}): {e}")
            return None

    def analyse_word_list(self, words: Iterable[str]) -> List[WordAnalysis]:
        """
        Анализирует список слов.

        Каждое слово предварительно очищается от пробелов по краям.
        Порядок результатов совпадает с порядком слов.

        Args:
            words: Слова для анализа

        Returns:
            Список результатов (при on_error='skip' без пропущенных слов)
        """
        prepared = [word.strip() for word in words]
        if not prepared:
            return []

        if self.workers > 1 and len(prepared) > 1:
            logger.debug(f"Пакетный анализ: слов={len(prepared)}, потоки={self.workers}")
            # map сохраняет исходный порядок и пробрасывает первое исключение
            with ThreadPoolExecutor(max_workers=self.workers) as ex:
                results = list(ex.map(self._analyze_or_skip, prepared))
        else:
            results = [self._analyze_or_skip(word) for word in prepared]

        return [result for result in results if result is not None]

    def analyse_text(self, text: str) -> List[WordAnalysis]:
        """
        Анализирует все слова текста.

        Args:
            text: Произвольный текст

        Returns:
            Список результатов в порядке следования слов
        """
        tokens = self.tokenizer.tokenize(text)
        logger.info(f"Найдено слов в тексте: {len(tokens)}")
        return self.analyse_word_list(tokens)

    def get_type_distribution(self, analyses: Iterable[WordAnalysis]) -> Dict[str, int]:
        """
        Подсчитывает распределение слов по типам.

        Args:
            analyses: Результаты анализа

        Returns:
            Словарь {тип: количество}; неопределённый тип учитывается как 'unknown'
        """
        counts = Counter(
            analysis.type.value if analysis.type else 'unknown'
            for analysis in analyses
        )
        return dict(counts.most_common())

    def get_summary_stats(self, analyses: List[WordAnalysis]) -> Dict[str, Any]:
        """Сводная статистика по результатам анализа."""
        total = len(analyses)
        syllables_total = sum(a.syllables_count for a in analyses)
        return {
            'total_words': total,
            'unique_words': len({a.value.lower() for a in analyses}),
            'avg_syllables': round(syllables_total / total, 2) if total else 0.0,
            'type_distribution': self.get_type_distribution(analyses),
        }


def analyse_word_list(words: Iterable[str],
                      on_error: str = 'raise',
                      workers: int = 1) -> List[WordAnalysis]:
    """Анализирует список слов (см. WordAnalyzer.analyse_word_list)."""
    return WordAnalyzer(workers=workers, on_error=on_error).analyse_word_list(words)


def analyse_text(text: str,
                 on_error: str = 'raise',
                 workers: int = 1) -> List[WordAnalysis]:
    """Анализирует все слова текста (см. WordAnalyzer.analyse_text)."""
    return WordAnalyzer(workers=workers, on_error=on_error).analyse_text(text)
