"""
Классификация символов испанского алфавита.

Чистые предикаты без состояния:
- гласные (с ударением и без)
- согласные (включая ñ)
- неразделимые сочетания согласных (диграфы)
"""

VOWELS = frozenset("aeiouáéíóú")
CONSONANTS = frozenset("bcdfghjklmnñpqrstvwxyz")

# Сочетания согласных, которые никогда не разрываются между слогами
CONSONANT_CLUSTERS = frozenset({
    'cl', 'bl', 'gl', 'gr', 'gn', 'll', 'pl', 'tl', 'cr',
    'br', 'dr', 'fr', 'pr', 'tr', 'ch', 'ps', 'rr', 'fl',
})


def is_vowel(ch: str) -> bool:
    """
    Проверяет, является ли символ гласной.

    Для строк длиннее одного символа возвращает True, если
    хотя бы один символ строки является гласной.

    Args:
        ch: Символ или фрагмент слова

    Returns:
        True если найдена гласная
    """
    return any(letter.lower() in VOWELS for letter in ch)


def is_consonant(ch: str) -> bool:
    """
    Проверяет, является ли символ согласной.

    Семантика для длинных строк такая же, как у is_vowel().

    Args:
        ch: Символ или фрагмент слова

    Returns:
        True если найдена согласная
    """
    return any(letter.lower() in CONSONANTS for letter in ch)


def is_consonant_cluster(s: str) -> bool:
    """Проверяет, является ли строка неразделимым сочетанием согласных."""
    return s.lower() in CONSONANT_CLUSTERS


# Имена, под которыми фрагменты проверяются в слогоделении
has_vowels = is_vowel
has_consonants = is_consonant
