import pytest

from requirejs_config.configuration import ConfigurationBuilder


class FakeLocaleProvider:
    def __init__(self, locale="en", error=None):
        self.locale = locale
        self.error = error

    def get_locale(self):
        if self.error:
            raise self.error
        return self.locale


class FakeAssetUrlResolver:
    def __init__(self, url="/", error=None):
        self.url = url
        self.error = error
        self.calls = []

    def get_url(self, path):
        self.calls.append(path)
        if self.error:
            raise self.error
        return self.url


class FakeDebugFlags:
    def __init__(self, parameters=None):
        self.parameters = dict(parameters or {})

    def has_parameter(self, name):
        return name in self.parameters

    def get_parameter(self, name):
        return self.parameters[name]


class FakeNamespaceMapper:
    def __init__(self, mapping=None):
        self.mapping = dict(mapping or {})
        self.calls = []

    def get_module_path(self, filename):
        self.calls.append(filename)
        return self.mapping.get(filename)


@pytest.fixture
def locale_provider():
    return FakeLocaleProvider("fr")


@pytest.fixture
def asset_resolver():
    return FakeAssetUrlResolver("/assets?v=3")


@pytest.fixture
def debug_flags():
    return FakeDebugFlags({"debug": True})


@pytest.fixture
def mapper():
    return FakeNamespaceMapper({"app/main.js": "bundle/app/main.js"})


@pytest.fixture
def make_builder(locale_provider, asset_resolver, debug_flags, mapper):
    def _make(**kwargs):
        kwargs.setdefault("base_url", "js/")
        return ConfigurationBuilder(locale_provider, asset_resolver, debug_flags, mapper, **kwargs)

    return _make
