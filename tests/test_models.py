import pytest
from pydantic import ValidationError

from script_recognizer.models import StructuredLocale


def test_equality_uses_all_fields():
    assert StructuredLocale(language='zh', script='Hant') == StructuredLocale(language='zh', script='Hant')
    assert StructuredLocale(language='zh', script='Hant') != StructuredLocale(language='zh', script='Hans')
    assert StructuredLocale(language='zh', script='Hant') != StructuredLocale(
        language='zh', script='Hant', region='TW')


def test_absent_is_not_empty_string():
    absent = StructuredLocale(language='en')
    empty = StructuredLocale(language='en', script='')
    assert absent != empty
    assert len({absent, empty}) == 2


def test_hashable_as_dict_key():
    table = {StructuredLocale(language='zh', script='Hant'): 'TW'}
    assert table[StructuredLocale(language='zh', script='Hant')] == 'TW'


def test_frozen():
    locale = StructuredLocale(language='zh')
    with pytest.raises(ValidationError):
        locale.language = 'en'


def test_language_required():
    with pytest.raises(ValidationError):
        StructuredLocale(language='')
    with pytest.raises(ValidationError):
        StructuredLocale(script='Hant')


def test_script_key():
    locale = StructuredLocale(language='zh', script='Hant', region='HK')
    assert locale.script_key == StructuredLocale(language='zh', script='Hant')
    assert locale.script_key.is_script_key
    assert not locale.is_script_key
    assert not StructuredLocale(language='zh').is_script_key


def test_str():
    assert str(StructuredLocale(language='zh', script='Hant', region='TW')) == 'zh_Hant_TW'
    assert str(StructuredLocale(language='en')) == 'en'


class AppLocale(StructuredLocale):
    pass


def test_keys_are_plain_locales():
    sub = AppLocale(language='zh', script='Hant')
    assert type(sub.script_key) is StructuredLocale
    assert type(sub.table_key) is StructuredLocale
    assert sub.table_key == StructuredLocale(language='zh', script='Hant')

    plain = StructuredLocale(language='zh', script='Hant', region='TW')
    assert plain.table_key is plain
