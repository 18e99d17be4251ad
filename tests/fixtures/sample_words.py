"""Эталонные результаты анализа слов.

Формат: слово -> (слоги, индекс ударного слога, тип).
"""

SAMPLE_WORDS = {
    "casa": (("ca", "sa"), 0, "paroxítona"),
    "árbol": (("ár", "bol"), 0, "paroxítona"),
    "reloj": (("re", "loj"), 1, "oxítona"),
    "canción": (("can", "ción"), 1, "oxítona"),
    "y": (("y",), 0, "monosílaba"),
    "murciélago": (("mur", "cié", "la", "go"), 1, "proparoxítona"),
    "sílaba": (("sí", "la", "ba"), 0, "proparoxítona"),
    "dígaselo": (("dí", "ga", "se", "lo"), 0, "superproparoxítona"),
    "hablar": (("ha", "blar"), 1, "oxítona"),
    "perro": (("pe", "rro"), 0, "paroxítona"),
    "calle": (("ca", "lle"), 0, "paroxítona"),
    "coche": (("co", "che"), 0, "paroxítona"),
    "tren": (("tren",), 0, "monosílaba"),
    "rey": (("rey",), 0, "monosílaba"),
    "país": (("pa", "ís"), 1, "oxítona"),
    "abstracto": (("abs", "trac", "to"), 1, "paroxítona"),
    "ventilador": (("ven", "ti", "la", "dor"), 3, "oxítona"),
    "pingüino": (("pin", "güi", "no"), 1, "paroxítona"),
    "estudiáis": (("es", "tu", "diáis"), 2, "oxítona"),
    "Uruguay": (("U", "ru", "guay"), 2, "oxítona"),
}
