"""Headline signals: token-set similarity and capitalized entity candidates."""

import re

# Capitalized words too common in headlines to identify an event.
ENTITY_STOPWORDS = frozenset({
    # Days
    "LUNES", "MARTES", "MIÉRCOLES", "MIERCOLES", "JUEVES", "VIERNES", "SÁBADO", "SABADO", "DOMINGO",
    "MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY",
    # Places and government
    "CHILE", "PAÍS", "PAIS", "REGIÓN", "REGION", "CIUDAD", "NACIONAL", "MUNDO", "WORLD",
    "GOBIERNO", "PRESIDENTE", "PRESIDENTA", "MINISTRO", "MINISTRA", "MINISTERIO",
    "GOVERNMENT", "PRESIDENT", "MINISTER", "STATE", "CONGRESO", "CONGRESS",
    # Newsroom
    "ÚLTIMO", "ULTIMO", "ÚLTIMA", "ULTIMA", "MINUTO", "URGENTE", "VIDEO", "VIDEOS", "FOTOS",
    "VIVO", "DIRECTO", "NOTICIAS", "BREAKING", "LIVE", "NEWS", "UPDATE", "WATCH",
    "OPINIÓN", "OPINION", "ENTREVISTA", "ANÁLISIS", "ANALISIS", "ESTE", "ESTA", "ESTOS", "ESTAS",
    "THIS", "THAT", "THESE", "WHAT", "WHEN", "WHERE",
})

_PUNCTUATION = re.compile(r"[^\w\s]|_")


def title_tokens(text: str) -> frozenset[str]:
    """Lower-case words of more than two characters, punctuation removed."""
    cleaned = _PUNCTUATION.sub("", text.lower())
    return frozenset(word for word in cleaned.split() if len(word) > 2)


def jaccard(a: frozenset[str], b: frozenset[str]) -> float:
    union = a | b
    if not union:
        return 0.0
    return len(a & b) / len(union)


def headline_similarity(title_a: str, title_b: str) -> float:
    """Jaccard index of the two headlines' token sets, in [0, 1]."""
    return jaccard(title_tokens(title_a), title_tokens(title_b))


def extract_entities(title: str) -> frozenset[str]:
    """
    Return lower-cased candidate proper nouns from a headline.

    A token qualifies when, stripped of everything but letters and digits,
    it is longer than three characters, starts with an upper-case letter,
    and is not a stopword.
    """
    entities = set()
    for token in title.split():
        cleaned = "".join(ch for ch in token if ch.isalnum())
        if len(cleaned) <= 3 or not cleaned[0].isupper():
            continue
        if cleaned.upper() in ENTITY_STOPWORDS:
            continue
        entities.add(cleaned.lower())
    return frozenset(entities)
