import logging

import pytest

from common_lib.registry import Registry


class ColorRegistry(Registry):
    def init(self):
        self.add_item('red', {'hex': '#f00', 'label': 'Red'})
        self.add_item('default', 'blue')


class SizeRegistry(Registry):
    def init(self):
        self.add_item('small', {'px': 8})


@pytest.fixture
def reg():
    r = ColorRegistry()
    r.init()
    return r


def test_abstract_init_required():
    with pytest.raises(TypeError):
        Registry()


def test_instance_is_singleton_per_subclass():
    a = ColorRegistry.instance()
    b = ColorRegistry.instance()
    assert a is b
    assert 'red' in a
    assert SizeRegistry.instance() is not a
    assert 'small' in SizeRegistry.instance()
    assert 'small' not in a


def test_instance_not_shared_with_derived_registry():
    class DerivedColors(ColorRegistry):
        pass

    base = ColorRegistry.instance()
    assert DerivedColors.instance() is not base
    assert DerivedColors.instance() is DerivedColors.instance()


def test_add_item_merges_attributes(reg):
    assert reg.add_item('red', {'label': 'Crimson', 'rgb': (255, 0, 0)}) is True
    assert reg.get('red') == {'hex': '#f00', 'label': 'Crimson', 'rgb': (255, 0, 0)}


def test_add_item_scalar_overwrites(reg):
    reg.add_item('default', 'green')
    assert reg.get('default') == 'green'
    reg.add_item('default', {'hex': '#0f0'})
    assert reg.get('default') == {'hex': '#0f0'}


def test_get_item_attribute(reg):
    assert reg.get_item_attribute('red', 'hex') == '#f00'
    assert reg.get_item_attribute('red', 'missing') is None
    assert reg.get_item_attribute('red', 'missing', 'x') == 'x'
    # scalar items return their value for any attribute
    assert reg.get_item_attribute('default', 'hex') == 'blue'
    assert reg.get_item_attribute('nope', 'hex', 'fallback') == 'fallback'


def test_remove_and_get_items(reg):
    reg.remove_item('red')
    reg.remove_item('not-there')
    assert reg.get('red') is None
    assert reg.get_items() == {'default': 'blue'}
    # get_items returns a copy
    reg.get_items()['other'] = 1
    assert 'other' not in reg


def test_mapping_access(reg):
    assert 'red' in reg
    assert reg['red']['hex'] == '#f00'
    with pytest.raises(KeyError):
        reg['missing']

    reg['red'] = {'extra': True}
    assert reg['red']['hex'] == '#f00'
    assert reg['red']['extra'] is True

    del reg['red']
    assert 'red' not in reg
    assert len(reg) == 1
    assert list(reg) == ['default']


def test_reset_items_under_tests(reg):
    reg.reset_items()
    assert len(reg) == 0


def test_reset_items_outside_tests_is_refused(reg, monkeypatch, caplog):
    monkeypatch.delenv('PYTEST_CURRENT_TEST', raising=False)
    monkeypatch.delenv('COMMON_LIB_TESTING', raising=False)
    with caplog.at_level(logging.WARNING, logger='common_lib.registry'):
        reg.reset_items()
    assert len(reg) == 2
    assert 'only intended for use in tests' in caplog.text
