"""Babel date formatting with script-aware locales.

Each helper resolves the given :class:`StructuredLocale` first, so
``zh_Hant`` is formatted as ``zh_TW`` instead of falling back to ``zh``::

    >>> format_date(date(2020, 1, 1), "EEE", StructuredLocale(language="zh", script="Hant"))
    '週三'
"""
import threading
from typing import Callable, Optional

import cachetools
from babel import Locale
from babel import dates as babel_dates
from cachetools import LRUCache

from script_recognizer.models import StructuredLocale
from script_recognizer.recognizer import ScriptRecognizer, get_recognizer

CACHE = LRUCache(maxsize=64)


@cachetools.cached(cache=CACHE, lock=threading.Lock())
def babel_locale(resolved: Optional[str]) -> Optional[Locale]:
    """Parse a resolved locale string; ``None`` stays ``None``."""
    if resolved is None:
        return None
    return Locale.parse(resolved)


def format_with(formatter: Callable, value, locale: Optional[StructuredLocale],
                recognizer: Optional[ScriptRecognizer] = None, **kwargs):
    """Call any Babel formatter with the resolved locale of ``locale``.

    When ``locale`` is ``None`` Babel picks its default locale.
    """
    recognizer = recognizer or get_recognizer()
    parsed = babel_locale(recognizer.resolve(locale))
    if parsed is not None:
        kwargs["locale"] = parsed
    return formatter(value, **kwargs)


def format_date(value, format: str = "medium", locale: Optional[StructuredLocale] = None,
                recognizer: Optional[ScriptRecognizer] = None) -> str:
    return format_with(babel_dates.format_date, value, locale, recognizer, format=format)


def format_datetime(value, format: str = "medium", locale: Optional[StructuredLocale] = None,
                    recognizer: Optional[ScriptRecognizer] = None, tzinfo=None) -> str:
    return format_with(babel_dates.format_datetime, value, locale, recognizer,
                       format=format, tzinfo=tzinfo)


def format_skeleton(skeleton: str, value, locale: Optional[StructuredLocale] = None,
                    recognizer: Optional[ScriptRecognizer] = None) -> str:
    recognizer = recognizer or get_recognizer()
    parsed = babel_locale(recognizer.resolve(locale))
    if parsed is None:
        return babel_dates.format_skeleton(skeleton, value)
    return babel_dates.format_skeleton(skeleton, value, locale=parsed)
