"""Curated outlet leanings and fallback name fragments."""

from types import MappingProxyType

SOURCE_LEANINGS = MappingProxyType({
    # Chile
    "La Tercera": "center-right",
    "Emol": "right",
    "El Mercurio": "right",
    "BioBioChile": "center",
    "Radio Bío-Bío": "center",
    "Radio Agricultura": "right",
    "Meganoticias": "center",
    "24horas.cl": "center",
    "T13": "center",
    "ADN Radio": "center",
    "CNN Chile": "center-left",
    "Cooperativa.cl": "center-left",
    "El Mostrador": "center-left",
    "El Desconcierto": "left",
    "La Izquierda Diario": "left",
    "El Ciudadano": "left",
    "The Clinic": "left",
    "Radio Universidad de Chile": "left",
    "Interferencia": "left",
    "El Líbero": "right",
    "Ex-Ante": "center-right",

    # International, Spanish-language
    "El País": "center-left",
    "Página/12": "left",
    "elDiario.es": "left",
    "RT": "left",
    "BBC News Mundo": "center",
    "CNN en Español": "center",
    "Deutsche Welle (Español)": "center",
    "Marca": "center",
    "Infobae": "center-right",
    "Clarín": "center-right",
    "La Nación": "center-right",
    "El Mundo": "center-right",
    "La Vanguardia": "center",
    "ABC": "right",

    # English-language
    "The New York Times": "center-left",
    "The Washington Post": "center-left",
    "CNN": "center-left",
    "MSNBC": "left",
    "The Guardian": "left",
    "Al Jazeera English": "center-left",
    "BBC News": "center",
    "Reuters": "center",
    "Associated Press": "center",
    "USA Today": "center",
    "Bloomberg": "center",
    "Wall Street Journal": "center-right",
    "The Wall Street Journal": "center-right",
    "New York Post": "right",
    "Fox News": "right",
})

# Lower-case words matched whole in outlet names, checked in this order: right, left, center.
RIGHT_FRAGMENTS = ("tercera", "mercurio", "emol", "fox", "agricultura", "breitbart")
LEFT_FRAGMENTS = ("mostrador", "izquierda", "ciudadano", "guardian", "desconcierto", "msnbc")
CENTER_FRAGMENTS = ("cnn", "bbc", "reuters", "associated press", "efe", "afp")
