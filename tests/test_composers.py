import pytest

from laraview.view import View
from laraview.view.composers import (
    CallbackSource,
    ComposerRegistry,
    ComposerSource,
    ConstantSource,
)


@pytest.fixture
def registry():
    return ComposerRegistry()


@pytest.fixture
def view():
    return View(None, 'home', 'home.html', {'title': 'Hi'})


class Profile:
    def to_map(self):
        return {'user': 'ada'}


def test_wrap_builds_tagged_sources():
    assert isinstance(ComposerSource.wrap(lambda view: {}), CallbackSource)
    assert isinstance(ComposerSource.wrap({'a': 1}), ConstantSource)

    source = ConstantSource({'a': 1})
    assert ComposerSource.wrap(source) is source


def test_callback_receives_the_view(view):
    source = CallbackSource(lambda v: {'seen': v.get_data()['title']})
    assert source.produce(view) == {'seen': 'Hi'}


def test_zero_argument_callback(view):
    assert CallbackSource(lambda: {'a': 1}).produce(view) == {'a': 1}


def test_constant_source_returns_a_copy(view):
    value = {'a': 1}
    produced = ConstantSource(value).produce(view)
    produced['a'] = 2
    assert value == {'a': 1}


def test_unusable_output_contributes_nothing(view):
    assert CallbackSource(lambda: None).produce(view) == {}
    assert ConstantSource(42).produce(view) == {}
    assert ConstantSource(['a']).produce(view) == {}


def test_to_map_output_is_coerced(view):
    assert CallbackSource(lambda: Profile()).produce(view) == {'user': 'ada'}


def test_get_unknown_key_is_empty(registry):
    assert registry.get('missing.html') == []
    assert registry.get_wildcard() == []


def test_registration_order_is_kept(registry, view):
    registry.register('home.html', {'a': 1})
    registry.register('home.html', {'a': 2})

    produced = [source.produce(view) for source in registry.get('home.html')]
    assert produced == [{'a': 1}, {'a': 2}]


def test_register_many_targets(registry):
    keys = registry.register(['home.html', 'about.html'], {'a': 1})

    assert keys == ['home.html', 'about.html']
    assert len(registry.get('home.html')) == 1
    assert len(registry.get('about.html')) == 1


def test_consume_drops_every_one_shot_entry(registry):
    registry.register('home.html', {'a': 1})
    registry.register('home.html', {'b': 2})

    registry.consume('home.html')

    assert registry.get('home.html') == []
    assert not registry.has('home.html')


def test_consume_keeps_persistent_entries(registry):
    registry.register('home.html', {'a': 1}, persistent=True)
    registry.register('home.html', {'b': 2})

    registry.consume('home.html')

    sources = registry.get('home.html')
    assert len(sources) == 1
    assert sources[0].value == {'a': 1}


def test_consume_only_touches_its_key(registry):
    registry.register('home.html', {'a': 1})
    registry.register('about.html', {'a': 1})

    registry.consume('home.html')

    assert registry.has('about.html')


def test_consume_wildcard(registry):
    registry.register('*', {'a': 1})
    registry.register('*', {'b': 2}, persistent=True)

    registry.consume_wildcard()

    assert [source.value for source in registry.get_wildcard()] == [{'b': 2}]


def test_wildcard_is_separate_from_view_keys(registry):
    registry.register('*', {'a': 1})

    assert registry.get('*') == []
    assert len(registry.get_wildcard()) == 1


def test_keys_and_flush(registry):
    registry.register('*', {'a': 1}, persistent=True)
    registry.register('home.html', {'a': 1})

    assert sorted(registry.keys()) == ['*', 'home.html']

    registry.flush()

    assert registry.keys() == []
    assert registry.get_wildcard() == []


def test_detach_drops_one_shot_entries_at_once(registry):
    registry.register('home.html', {'a': 1})
    registry.register('home.html', {'b': 2}, persistent=True)

    entries = registry.detach('home.html')

    assert [entry.source.value for entry in entries] == [{'a': 1}, {'b': 2}]
    assert [source.value for source in registry.get('home.html')] == [{'b': 2}]


def test_restore_puts_entries_back_in_order(registry):
    registry.register('*', {'a': 1})
    registry.register('*', {'b': 2}, persistent=True)

    entries = registry.detach('*')
    registry.register('*', {'c': 3})
    registry.restore('*', entries)

    assert [source.value for source in registry.get_wildcard()] == [{'a': 1}, {'b': 2}, {'c': 3}]


def test_restore_of_an_empty_key_is_a_no_op(registry):
    registry.restore('home.html', registry.detach('home.html'))

    assert not registry.has('home.html')
    assert registry.keys() == []
