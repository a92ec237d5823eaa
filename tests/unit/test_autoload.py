import pytest

import importlib

autoload_mod = importlib.import_module('common_lib.autoload')
from common_lib.autoload import Autoloader, file_words
from common_lib.errors import AutoloadError


def test_file_words():
    assert file_words('Interface_Database') == ['interface', 'database']
    assert file_words('ComponentDatabase') == ['component', 'database']
    assert file_words('Shared_Queries') == ['shared', 'queries']


def test_resolve_naming_conventions(tmp_path):
    loader = Autoloader(tmp_path)
    assert loader.resolve('Common.Dry.Database.ComponentDatabase') == tmp_path / 'dry' / 'database' / 'class-component-database.py'
    assert loader.resolve('Common\\Interfaces\\Database') == tmp_path / 'interfaces' / 'interface-database.py'
    assert loader.resolve('Common.Database_Interface') == tmp_path / 'interface-database.py'
    assert loader.resolve('Common.Interface_Meta_Database') == tmp_path / 'interface-meta-database.py'
    assert loader.resolve('Common.Traits.SharedQueries') == tmp_path / 'traits' / 'trait-shared-queries.py'
    assert loader.resolve('Common.Dry.Trait_Shared_Queries') == tmp_path / 'dry' / 'trait-shared-queries.py'
    assert loader.resolve('Common.Utils.Registry') == tmp_path / 'utils' / 'class-registry.py'


def test_resolve_requires_namespace(tmp_path):
    with pytest.raises(ValueError):
        Autoloader(tmp_path).resolve('Registry')


def test_load_once_and_find(tmp_path):
    utils = tmp_path / 'utils'
    utils.mkdir()
    (utils / 'class-registry.py').write_text(
        'LOADS = []\nLOADS.append(1)\n\nclass Registry:\n    pass\n'
    )
    loader = Autoloader(tmp_path, namespace='Common')

    module = loader.load('Common.Utils.Registry')
    assert module is not None
    assert loader.load('Common.Utils.Registry') is module
    assert module.LOADS == [1]

    cls = loader.find('Common.Utils.Registry')
    assert cls is module.Registry


def test_load_missing_or_foreign_returns_none(tmp_path):
    loader = Autoloader(tmp_path, namespace='Common')
    assert loader.load('Common.Utils.Missing') is None
    assert loader.load('Other.Utils.Registry') is None
    assert loader.find('Common.Utils.Missing') is None


def test_load_broken_file_raises(tmp_path):
    (tmp_path / 'class-broken.py').write_text('def broken(:\n')
    loader = Autoloader(tmp_path)
    with pytest.raises(AutoloadError):
        loader.load('Common.Broken')


def test_registered_loaders(tmp_path):
    first = tmp_path / 'first'
    second = tmp_path / 'second'
    first.mkdir()
    second.mkdir()
    (second / 'interface-widget.py').write_text('class Widget_Interface:\n    pass\n')

    a = Autoloader(first)
    b = Autoloader(second)
    autoload_mod.register(a)
    autoload_mod.register(b)
    autoload_mod.register(b)
    try:
        found = autoload_mod.autoload('App.Widget_Interface')
        assert found is not None
        assert found.__name__ == 'Widget_Interface'
        assert autoload_mod.autoload('App.Unknown') is None
    finally:
        autoload_mod.unregister(a)
        autoload_mod.unregister(b)
    assert autoload_mod.autoload('App.Widget_Interface') is None
