"""Greetings in a handful of languages."""

SPANISH = "Spanish"
FRENCH = "French"

_PREFIXES = {
    SPANISH: "Hola, ",
    FRENCH: "Bonjour, ",
}
_DEFAULT_PREFIX = "Hello, "


def hello(name: str = "", language: str = "") -> str:
    """Greet ``name`` in ``language``, falling back to English and "World"."""
    return _PREFIXES.get(language, _DEFAULT_PREFIX) + (name or "World")