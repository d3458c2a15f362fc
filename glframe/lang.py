"""Interface languages and placeholder substitution for translated text."""

from __future__ import annotations

from enum import Enum
from typing import Any

MISSING_TRANSLATION_PREFIX = "Missing translation"


class Language(Enum):
    CHINESE_SIMPLIFIED = "zh-CN"
    ENGLISH = "en-US"
    JAPANESE = "ja-JP"
    KOREAN = "ko-KR"
    CHINESE_TRADITIONAL = "zh-TW"


def language_code(lang: Language) -> str:
    """Return the locale code of a language."""
    return lang.value


def language_from_code(code: str) -> Language:
    """Return the language for a locale code, Simplified Chinese if unknown."""
    try:
        return Language(code)
    except ValueError:
        return Language.CHINESE_SIMPLIFIED


def to_text(value: Any) -> str:
    """Render a value the way it is substituted into a translation."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def replace_placeholders(text: str, *args: Any) -> str:
    """Replace {0}, {1}, ... in turn with the given arguments."""
    for index, arg in enumerate(args):
        text = text.replace("{" + str(index) + "}", to_text(arg))
    return text


def format_text(template: str, *args: Any) -> str:
    """Fill a translation template, leaving missing translations untouched."""
    if not args or template.startswith(MISSING_TRANSLATION_PREFIX):
        return template
    return replace_placeholders(template, *args)