import pytest

import script_recognizer
from script_recognizer import recognizer
from script_recognizer.errors import InvalidRegionCodeError
from script_recognizer.models import StructuredLocale


class DummyConfig:
    def __init__(self):
        self.fields = {}

    def deffield(self, name, type_=None, default=None, desc=''):
        self.fields[name] = (type_, default)
        setattr(self, name, default)


class DummyAppConfig:
    def __init__(self, plugin_config):
        self.script_recognizer = plugin_config


class DummyApp:
    def __init__(self, plugin_config):
        self.config = DummyAppConfig(plugin_config)


@pytest.fixture(autouse=True)
def no_shared_instance(monkeypatch):
    monkeypatch.setattr(recognizer, '_instance', None)


@pytest.fixture
def config():
    config = DummyConfig()
    script_recognizer.init_config(config)
    return config


def test_init_config(config):
    assert config.fields['SCRIPT_REGIONS'] == (dict, {})
    assert config.fields['CUSTOM_REGIONS'] == (list, [])


def test_enable_with_defaults(config):
    script_recognizer.enable(DummyApp(config))
    shared = script_recognizer.get_recognizer()
    assert shared.resolve(StructuredLocale(language='zh', script='Hant')) == 'zh_TW'


def test_enable_applies_config(config):
    config.CUSTOM_REGIONS = ['XK']
    config.SCRIPT_REGIONS = {'zh_Hant': 'HK', 'sq-Latn': 'XK'}
    script_recognizer.enable(DummyApp(config))

    shared = script_recognizer.get_recognizer()
    assert shared.custom_regions == frozenset({'XK'})
    assert shared.resolve(StructuredLocale(language='zh', script='Hant')) == 'zh_HK'
    assert shared.resolve(StructuredLocale(language='sq', script='Latn')) == 'sq_XK'


def test_enable_rejects_bad_config(config):
    config.SCRIPT_REGIONS = {'zh_Hans': 'XX'}
    with pytest.raises(InvalidRegionCodeError):
        script_recognizer.enable(DummyApp(config))


def test_disable_resets(config):
    config.SCRIPT_REGIONS = {'zh_Hans': 'SG'}
    app = DummyApp(config)
    script_recognizer.enable(app)
    script_recognizer.disable(app)
    assert not script_recognizer.get_recognizer().is_registered(
        StructuredLocale(language='zh', script='Hans'))


def test_disable_before_enable(config):
    script_recognizer.disable(DummyApp(config))
    assert recognizer._instance is None
