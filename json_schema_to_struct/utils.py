"""
Utility functions for the JSON Schema to struct generator.
"""

import re

# Words are runs of letters split before ASCII capitals, or runs of digits;
# non-ASCII letters are kept
_WORD_PATTERN = re.compile(r"[^\W\d_][^\W\dA-Z_]*|\d+")


def _normalize_separators(text: str) -> str:
    """Normalize separators (underscores, hyphens, dots) to spaces."""
    return text.replace("_", " ").replace("-", " ").replace(".", " ")


def _split_into_words(text: str) -> list[str]:
    """Split text into words, handling camelCase boundaries."""
    return _WORD_PATTERN.findall(text)


def _capitalize_and_join(words: list[str]) -> str:
    """Upper-case the first letter of each word and join them together."""
    return "".join(word[0].upper() + word[1:] for word in words if word)


def to_pascal_case(text: str) -> str:
    """Convert snake_case, kebab-case, camelCase or space-separated text to PascalCase.

    Letters after the first one keep their case, so acronyms survive.

    Examples:
        "model" -> "Model"
        "user_profile" -> "UserProfile"
        "user-profile" -> "UserProfile"
        "userProfile" -> "UserProfile"
        "ID" -> "ID"
        "v2 model" -> "V2Model"
        "café" -> "Café"

    Args:
        text: The text to convert

    Returns:
        PascalCase string, empty if the text holds no letters or digits
    """
    if not text:
        return ""
    normalized = _normalize_separators(text)
    words = _split_into_words(normalized)
    return _capitalize_and_join(words)
