"""
Компонент для определения ударного слога и типа слова.

Правила испанского ударения:
- слово на гласную, -n или -s ударяется на предпоследний слог
- слово на любую другую согласную ударяется на последний слог
- графическое ударение (á é í ó ú) всегда имеет приоритет
"""

from typing import Optional, Sequence

from ..interfaces.word_processor import WordType

# Окончания, при которых ударение по умолчанию падает на предпоследний слог
PENULTIMATE_ENDINGS = frozenset("aeiouns")
ACCENTED_VOWELS = frozenset("áéíóúÁÉÍÓÚ")


def default_tonic_index(word: str, syllables_count: int) -> int:
    """Индекс ударного слога по общему правилу, без учёта графического ударения."""
    last_letter = word[-1:].lower()
    if last_letter and last_letter in PENULTIMATE_ENDINGS:
        return max(syllables_count - 2, 0)
    return max(syllables_count - 1, 0)


def locate_tonic_index(word: str, syllables: Sequence[str]) -> int:
    """
    Определяет индекс ударного слога.

    Если графическое ударение встречается в нескольких слогах,
    побеждает последний из них.

    Args:
        word: Исходное слово
        syllables: Слоги слова

    Returns:
        Индекс в диапазоне [0, len(syllables) - 1] (0 для пустого списка)
    """
    tonic_index = default_tonic_index(word, len(syllables))

    for index, syllable in enumerate(syllables):
        if any(letter in ACCENTED_VOWELS for letter in syllable):
            tonic_index = index

    return tonic_index


def classify_word(syllables_count: int, tonic_index: int) -> Optional[WordType]:
    """
    Возвращает просодический тип слова.

    Args:
        syllables_count: Количество слогов
        tonic_index: Индекс ударного слога

    Returns:
        WordType или None, если тип определить нельзя
    """
    distance_from_end = syllables_count - tonic_index

    if syllables_count == 1:
        return WordType.MONOSILABA
    if distance_from_end == 1:
        return WordType.OXITONA
    if distance_from_end == 2:
        return WordType.PAROXITONA
    if distance_from_end == 3:
        return WordType.PROPAROXITONA
    if distance_from_end > 3:
        return WordType.SUPERPROPAROXITONA
    return None
