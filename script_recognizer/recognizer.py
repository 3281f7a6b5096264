import logging
import threading
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Mapping, Optional

from script_recognizer.consts import (
    COUNTRY_CODES,
    REGION_CODE_PATTERN,
    SEED_LANGUAGE,
    SEED_REGION,
    SEED_SCRIPT,
)
from script_recognizer.errors import (
    InvalidArgumentError,
    InvalidKeyError,
    InvalidRegionCodeError,
    NotInitializedError,
    RegionFormatError,
    UnsupportedOperationError,
)
from script_recognizer.models import StructuredLocale

logger = logging.getLogger(__name__)


def _region_set(codes: Iterable[str]) -> FrozenSet[str]:
    # A bare string would otherwise be split into letters.
    if isinstance(codes, str):
        raise InvalidArgumentError(
            f"custom regions must be a collection of strings, not the string {codes!r}"
        )
    return frozenset(codes)


class CustomRegionMode(Enum):
    mutable = "mutable"
    fixed = "fixed"


class ScriptRecognizer:
    """Resolve a :class:`StructuredLocale` into a string Babel understands.

    Babel only knows ``language`` and ``language_REGION``. A locale that
    carries a script but no region (``zh_Hant``) would fall back to the bare
    language, so the recognizer keeps a table from (language, script) to a
    region and fills the region in when the caller did not give one.

    Every recognizer starts with ``zh_Hant -> TW`` registered.
    """

    def __init__(self, custom_regions: Optional[Iterable[str]] = None,
                 mode: CustomRegionMode = CustomRegionMode.mutable):
        self._lock = threading.RLock()
        self._mode = mode
        self._custom_regions: FrozenSet[str] = frozenset()
        self._table: Dict[StructuredLocale, str] = {}

        if custom_regions is not None:
            custom_regions = _region_set(custom_regions)
            # Fixed recognizers may be built without any custom region.
            if custom_regions or mode is CustomRegionMode.mutable:
                self._apply_custom_regions(custom_regions)

        self.register({
            StructuredLocale(language=SEED_LANGUAGE, script=SEED_SCRIPT): SEED_REGION
        })

    @classmethod
    def isolated(cls, custom_regions: Optional[Iterable[str]] = None) -> "ScriptRecognizer":
        """Build a recognizer that is not shared and whose custom regions never change.

        Meant for libraries that must not touch the process-wide recognizer.
        :meth:`set_custom_regions` raises :class:`UnsupportedOperationError`
        on the returned instance; mappings can still be registered.
        """
        return cls(custom_regions=custom_regions, mode=CustomRegionMode.fixed)

    @property
    def custom_regions_fixed(self) -> bool:
        return self._mode is CustomRegionMode.fixed

    @property
    def custom_regions(self) -> FrozenSet[str]:
        return self._custom_regions

    @property
    def mappings(self) -> Dict[StructuredLocale, str]:
        with self._lock:
            return dict(self._table)

    def _apply_custom_regions(self, codes: FrozenSet[str]):
        if not codes:
            raise InvalidArgumentError(
                "custom regions must be either None or a non-empty set of strings"
            )
        invalid = {
            code for code in codes
            if not isinstance(code, str) or REGION_CODE_PATTERN.fullmatch(code) is None
        }
        if invalid:
            raise RegionFormatError(invalid)
        with self._lock:
            self._custom_regions = codes - COUNTRY_CODES
        logger.debug("custom regions set to %s", sorted(self._custom_regions))

    def set_custom_regions(self, codes: Optional[Iterable[str]]):
        """Accept extra region codes that ISO 3166 does not (yet) define.

        ``None`` clears them. An empty collection is rejected with
        :class:`InvalidArgumentError`, and any code that is not two capital
        letters with :class:`RegionFormatError`. Codes already defined by
        ISO 3166 are dropped silently.
        """
        if self._mode is CustomRegionMode.fixed:
            raise UnsupportedOperationError(
                "custom regions are fixed at construction for this recognizer"
            )
        if codes is None:
            with self._lock:
                self._custom_regions = frozenset()
            logger.debug("custom regions cleared")
            return
        self._apply_custom_regions(_region_set(codes))

    def register(self, entries: Mapping[StructuredLocale, str], replace_existing: bool = False):
        """Map script-only locales to a region code.

        Every key must carry a script and no region, otherwise
        :class:`InvalidKeyError`; every value must be a known or custom region
        code (case-insensitive), otherwise :class:`InvalidRegionCodeError`.
        The whole batch is validated before anything is written.

        Keys that are registered already keep their region unless
        ``replace_existing`` is true.
        """
        with self._lock:
            normalized = {}
            for key, value in entries.items():
                if not isinstance(key, StructuredLocale) or not key.is_script_key:
                    raise InvalidKeyError()
                normalized[key.table_key] = str(value).upper()
            accepted = COUNTRY_CODES | self._custom_regions
            if any(value not in accepted for value in normalized.values()):
                raise InvalidRegionCodeError()

            for key, value in normalized.items():
                if key in self._table and not replace_existing:
                    logger.debug("skip %s, it is registered already", key)
                    continue
                self._table[key] = value
                logger.debug("register %s -> %s", key, value)

    def is_registered(self, locale: StructuredLocale) -> bool:
        if not isinstance(locale, StructuredLocale):
            return False
        with self._lock:
            return locale.table_key in self._table

    def unregister(self, locale: StructuredLocale):
        if not isinstance(locale, StructuredLocale):
            return
        with self._lock:
            self._table.pop(locale.table_key, None)

    def resolve(self, locale: Optional[StructuredLocale]) -> Optional[str]:
        """Return ``language`` or ``language_REGION`` for ``locale``.

        1. ``None`` gives ``None``.
        2. A region given by the caller is used as is.
        3. Otherwise the region registered for (language, script) is used.
        4. Otherwise the bare language is returned.
        """
        if locale is None:
            return None
        if locale.region is not None:
            return f"{locale.language}_{locale.region}"
        with self._lock:
            region = self._table.get(locale.script_key)
        if region is not None:
            return f"{locale.language}_{region}"
        return locale.language


_instance: Optional[ScriptRecognizer] = None
_instance_lock = threading.Lock()


def get_recognizer() -> ScriptRecognizer:
    """Return the process-wide recognizer, creating it on first use."""
    global _instance

    with _instance_lock:
        if _instance is None:
            _instance = ScriptRecognizer()
        return _instance


def factory_reset() -> ScriptRecognizer:
    """Replace the process-wide recognizer with a freshly seeded one.

    Mappings and custom regions applied to the old instance are gone.
    Recognizers built with :meth:`ScriptRecognizer.isolated` are not affected.
    """
    global _instance

    with _instance_lock:
        if _instance is None:
            raise NotInitializedError("No recognizer created yet")
        _instance = ScriptRecognizer()
        logger.info("shared recognizer reset to defaults")
        return _instance
