"""Наборы испанских текстов для тестирования.

Содержит простые и сложные примеры, а также HTML-текст для проверки извлечения.
"""

SAMPLE_SIMPLE_TEXT = """
Los gatos duermen mucho. Los perros corren rápido.
""".strip()


SAMPLE_COMPLEX_TEXT = """
Aunque los estudiantes suelen estudiar por la noche, algunos prefieren
levantarse temprano para repasar, lo cual puede mejorar la memoria a largo plazo.
""".strip()


SAMPLE_HTML_TEXT = """
<div>
  <p>La casa es grande y <strong>bonita</strong>.</p>
  <p>El murciélago vuela en el jardín.</p>
</div>
""".strip()
