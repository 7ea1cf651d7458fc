"""
English inflection helpers used to name paginated entities.

Only the rules needed for model and collection names are covered:
regular suffix rules, a handful of irregular words and uncountable nouns.
For multi-word names only the last word is inflected.
"""

import re

UNCOUNTABLE = frozenset(
    {
        "equipment",
        "information",
        "rice",
        "money",
        "species",
        "series",
        "fish",
        "sheep",
        "news",
        "metadata",
        "data",
    }
)

IRREGULAR = {
    "person": "people",
    "man": "men",
    "woman": "women",
    "child": "children",
    "sex": "sexes",
    "move": "moves",
    "mouse": "mice",
    "ox": "oxen",
}

# Checked in order, the first match wins.
PLURAL_RULES: tuple[tuple[str, str], ...] = (
    (r"(quiz)$", r"\1zes"),
    (r"(matr|vert|ind)(?:ix|ex)$", r"\1ices"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(hive)$", r"\1s"),
    (r"(?:([^f])fe|([lr])f)$", r"\1\2ves"),
    (r"sis$", "ses"),
    (r"([ti])um$", r"\1a"),
    (r"(buffal|tomat)o$", r"\1oes"),
    (r"(bu)s$", r"\1ses"),
    (r"(alias|status)$", r"\1es"),
    (r"(octop|vir)us$", r"\1i"),
    (r"(ax|test)is$", r"\1es"),
    (r"s$", "s"),
    (r"$", "s"),
)

_CAMEL_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])|([a-z\d])([A-Z])")


def pluralize(word: str) -> str:
    """Return the plural form of ``word``.

    Example:
        pluralize("entity") → "entities"
        pluralize("article comment") → "article comments"
    """
    if not word:
        return word

    head, separator, last = word.rpartition(" ")
    lowered = last.lower()

    if lowered in UNCOUNTABLE:
        return word

    if lowered in IRREGULAR:
        plural = IRREGULAR[lowered]
        if last[:1].isupper():
            plural = plural.capitalize()
        return f"{head}{separator}{plural}"

    for pattern, replacement in PLURAL_RULES:
        if re.search(pattern, last, flags=re.IGNORECASE):
            return f"{head}{separator}{re.sub(pattern, replacement, last, count=1, flags=re.IGNORECASE)}"

    return word


def underscore(name: str) -> str:
    """Convert a class or display name to snake_case.

    Example:
        underscore("ArticleComment") → "article_comment"
        underscore("article comment") → "article_comment"
    """
    result = _CAMEL_BOUNDARY.sub(
        lambda m: f"{m.group(1)}_{m.group(2)}" if m.group(1) else f"{m.group(3)}_{m.group(4)}",
        name.strip(),
    )
    result = re.sub(r"[\s\-]+", "_", result)
    return result.replace("::", "/").lower()


def humanize(name: str) -> str:
    """Turn a class name into a lower-case phrase: ``ArticleComment`` → ``article comment``."""
    return underscore(name).replace("_", " ")
