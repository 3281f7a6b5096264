import locale
import logging
from typing import Optional

from babel.core import parse_locale as babel_parse_locale

from script_recognizer.models import StructuredLocale
from script_recognizer.recognizer import ScriptRecognizer, get_recognizer

logger = logging.getLogger(__name__)


def parse_locale(tag: str) -> StructuredLocale:
    """Split a locale tag such as ``zh-Hant``, ``zh_Hant_TW`` or ``en_GB.UTF-8``.

    Raises ``ValueError`` when the tag is not a locale identifier.
    """
    # Babel only accepts "_" between subtags.
    normalized = tag.strip().replace("-", "_")
    parts = babel_parse_locale(normalized)
    language, region, script = parts[0], parts[1], parts[2]
    return StructuredLocale(language=language, script=script, region=region)


def resolve_language(app, configured: Optional[str] = None,
                     recognizer: Optional[ScriptRecognizer] = None) -> Optional[str]:
    """Resolve the language the host application runs with.

    An explicit ``configured`` tag wins, then ``app.language_code``, then the
    system locale. Returns ``None`` when none of them is usable.
    """
    recognizer = recognizer or get_recognizer()

    if configured and str(configured).lower() != "auto":
        tag = str(configured)
    else:
        # New FeelUOwn provides app.language_code; older versions do not.
        tag = getattr(app, "language_code", None)
        if not tag:
            # May be None or "C" on some platforms.
            tag, _ = locale.getlocale(locale.LC_CTYPE)
    if not tag or tag in ("C", "POSIX"):
        return None

    try:
        structured = parse_locale(tag)
    except ValueError:
        logger.debug("unable to parse locale tag %r", tag)
        return None
    return recognizer.resolve(structured)
