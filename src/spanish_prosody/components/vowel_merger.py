"""
Компонент для объединения гласных в дифтонги и трифтонги.

Проходит слово слева направо и выдаёт последовательность
фонетических единиц: отдельную букву или группу гласных,
которая произносится как одно слоговое ядро.
"""

from typing import List
import logging

logger = logging.getLogger(__name__)

OPEN_VOWELS = frozenset("aeoAEO")
CLOSED_VOWELS = frozenset("iuIU")
# Допускают как ударные, так и безударные формы
OPEN_VOWELS_ACCENTED = OPEN_VOWELS | frozenset("áéóÁÉÓ")
CLOSED_VOWELS_ACCENTED = CLOSED_VOWELS | frozenset("íúÍÚ")

PLAIN_VOWELS = frozenset("aeiou")
UMLAUTS = frozenset("üÜ")


def is_triphthong(first: str, second: str, third: str) -> bool:
    """Проверяет шаблоны закрытая-открытая-закрытая и открытая-закрытая-открытая."""
    return (
        (first in CLOSED_VOWELS_ACCENTED
         and second in OPEN_VOWELS_ACCENTED
         and third in CLOSED_VOWELS_ACCENTED)
        or (first in OPEN_VOWELS_ACCENTED
            and second in CLOSED_VOWELS_ACCENTED
            and third in OPEN_VOWELS_ACCENTED)
    )


def is_diphthong(first: str, second: str) -> bool:
    """
    Проверяет, образуют ли две буквы дифтонг.

    Ударная закрытая гласная (í, ú) рядом с открытой даёт зияние,
    поэтому закрытая гласная здесь допускается только без ударения.

    Args:
        first: Текущая буква
        second: Следующая буква

    Returns:
        True если буквы произносятся в одном слоге
    """
    return (
        (first in OPEN_VOWELS_ACCENTED and second in CLOSED_VOWELS)
        or (first in CLOSED_VOWELS and second in OPEN_VOWELS_ACCENTED)
        or (first in UMLAUTS and second in PLAIN_VOWELS)
        or (first in ('u', 'U') and second in ('i', 'I', 'í', 'Í'))
    )


def merge_vowel_clusters(word: str) -> List[str]:
    """
    Разбивает слово на фонетические единицы.

    Args:
        word: Исходное слово

    Returns:
        Список единиц; их конкатенация в точности равна исходному слову
    """
    units: List[str] = []
    word_len = len(word)
    i = 0

    while i < word_len:
        letter = word[i]
        next_letter = word[i + 1] if i + 1 < word_len else ''
        next_two_letter = word[i + 2] if i + 2 < word_len else ''

        if next_two_letter and is_triphthong(letter, next_letter, next_two_letter):
            units.append(letter + next_letter + next_two_letter)
            i += 3
        elif next_letter and is_diphthong(letter, next_letter):
            units.append(letter + next_letter)
            i += 2
        else:
            units.append(letter)
            i += 1

    logger.debug(f"Фонетические единицы '{word}': {units}")
    return units
