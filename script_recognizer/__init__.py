import logging

from script_recognizer.errors import (
    ScriptRecognizerError,
    InvalidKeyError,
    InvalidRegionCodeError,
    InvalidArgumentError,
    RegionFormatError,
    UnsupportedOperationError,
    NotInitializedError,
)
from script_recognizer.models import StructuredLocale
from script_recognizer.recognizer import (
    CustomRegionMode,
    ScriptRecognizer,
    get_recognizer,
    factory_reset,
)
from script_recognizer.language import parse_locale, resolve_language

__alias__ = 'script_recognizer'
__version__ = '0.1.0'
__desc__ = 'Script-aware locale resolving for Babel'

logger = logging.getLogger(__name__)


def init_config(config):
    # For example: {'zh_Hans': 'SG'}. Mapped regions replace the defaults.
    config.deffield('SCRIPT_REGIONS', type_=dict, default={},
                    desc='Region used for a language written in a script')
    # For example: ['XK']. Region codes that ISO 3166 does not define.
    config.deffield('CUSTOM_REGIONS', type_=list, default=[],
                    desc='Extra region codes accepted by SCRIPT_REGIONS')


def enable(app):
    config = app.config.script_recognizer
    recognizer = get_recognizer()

    if config.CUSTOM_REGIONS:
        recognizer.set_custom_regions(config.CUSTOM_REGIONS)
    if config.SCRIPT_REGIONS:
        entries = {parse_locale(tag): region for tag, region in config.SCRIPT_REGIONS.items()}
        recognizer.register(entries, replace_existing=True)
    logger.info('script recognizer enabled with %d mapping(s)', len(recognizer.mappings))


def disable(app):
    try:
        factory_reset()
    except NotInitializedError:
        return
    logger.info('script recognizer disabled')
