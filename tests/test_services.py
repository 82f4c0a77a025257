import pytest

from requirejs_config.configuration import ConfigurationBuilder
from requirejs_config.services import (
    AssetsHelper,
    NamespaceMapping,
    ParameterBag,
    ParameterNotFoundError,
    RequestLocaleProvider,
    StaticLocaleProvider,
)
from requirejs_config.services.locale import parse_accept_language


class TestAssetsHelper:
    def test_root_without_base_path(self):
        assert AssetsHelper().get_url("") == "/"

    def test_base_path_and_version(self):
        helper = AssetsHelper(base_path="/static/", version="3")

        assert helper.get_url("js/app.js") == "/static/js/app.js?3"
        assert helper.get_url("") == "/static/?3"

    def test_custom_version_format(self):
        helper = AssetsHelper(base_path="static", version="abc", version_format="%s?v=%s")

        assert helper.get_url("") == "/static/?v=abc"

    def test_base_urls_are_deterministic(self):
        helper = AssetsHelper(base_urls=["https://a.example.com/", "https://b.example.com"])

        first = helper.get_url("js/app.js")
        assert first == helper.get_url("js/app.js")
        assert first.endswith("/js/app.js")
        assert first.startswith(("https://a.example.com/", "https://b.example.com/"))

    def test_absolute_urls_pass_through(self):
        helper = AssetsHelper(base_path="static", version="1")

        assert helper.get_url("https://cdn.example.com/x.js") == "https://cdn.example.com/x.js"


class TestLocale:
    def test_static(self):
        assert StaticLocaleProvider("de").get_locale() == "de"

    def test_parse_respects_quality(self):
        header = "fr;q=0.5, en-US, de;q=0.8, *;q=0.1, es;q=0"

        assert parse_accept_language(header) == ["en-US", "de", "fr"]

    def test_exact_match_wins(self):
        provider = RequestLocaleProvider("pt-BR,pt;q=0.9", ["pt", "pt_BR"], "en")

        assert provider.get_locale() == "pt_BR"

    def test_primary_language_match(self):
        provider = RequestLocaleProvider("fr-CA", ["en", "fr"], "en")

        assert provider.get_locale() == "fr"

    def test_falls_back_to_default(self):
        assert RequestLocaleProvider("ja", ["en", "fr"], "en").get_locale() == "en"
        assert RequestLocaleProvider(None, ["en", "fr"], "fr").get_locale() == "fr"


class TestParameterBag:
    def test_has_and_get(self):
        bag = ParameterBag({"debug": False})

        assert bag.has_parameter("debug")
        assert bag.get_parameter("debug") is False
        assert not bag.has_parameter("locale")

    def test_missing_parameter_raises(self):
        with pytest.raises(ParameterNotFoundError):
            ParameterBag().get_parameter("debug")

    def test_set_parameter(self):
        bag = ParameterBag()
        bag.set_parameter("debug", True)

        assert bag.get_parameter("debug") is True


class TestNamespaceMapping:
    @pytest.fixture
    def assets_dir(self, tmp_path):
        views = tmp_path / "public" / "js" / "views"
        views.mkdir(parents=True)
        (views / "main.js").write_text("define([], function () {});")
        (tmp_path / "vendor.js").write_text("")
        return tmp_path

    def test_filesystem_path_under_namespace(self, assets_dir):
        mapping = NamespaceMapping()
        mapping.register_namespace("app", assets_dir / "public" / "js")

        module_path = mapping.get_module_path(str(assets_dir / "public" / "js" / "views" / "main.js"))

        assert module_path == "app/views/main.js"

    def test_registered_file(self, assets_dir):
        mapping = NamespaceMapping()
        mapping.register_namespace("vendor", assets_dir / "vendor.js")

        assert mapping.get_module_path(str(assets_dir / "vendor.js")) == "vendor.js"

    def test_nested_namespace_wins(self, assets_dir):
        mapping = NamespaceMapping()
        mapping.register_namespace("app", assets_dir / "public" / "js")
        mapping.register_namespace("app/views", assets_dir / "public" / "js" / "views")

        assert mapping.get_module_path(str(assets_dir / "public" / "js" / "views" / "main.js")) == "app/views/main.js"
        assert mapping.get_module_path("app/views/other") == "app/views/other"

    def test_logical_name(self, assets_dir):
        mapping = NamespaceMapping()
        mapping.register_namespace("app", assets_dir / "public" / "js")

        assert mapping.get_module_path("app/router.js") == "app/router.js"
        assert mapping.get_module_path("application/router") is None

    def test_outside_any_namespace(self, assets_dir):
        mapping = NamespaceMapping()
        mapping.register_namespace("app", assets_dir / "public" / "js")

        assert mapping.get_module_path(str(assets_dir / "vendor.js")) is None

    def test_invalid_registrations(self, tmp_path):
        mapping = NamespaceMapping()

        with pytest.raises(ValueError):
            mapping.register_namespace("app", tmp_path / "missing")
        with pytest.raises(ValueError):
            mapping.register_namespace("/", tmp_path)


def test_builder_with_concrete_services(tmp_path):
    js_dir = tmp_path / "js"
    js_dir.mkdir()
    (js_dir / "main.js").write_text("")
    mapping = NamespaceMapping()
    mapping.register_namespace("app", js_dir)

    builder = ConfigurationBuilder(
        StaticLocaleProvider("en"),
        AssetsHelper(base_path="/static", version="42"),
        ParameterBag({"debug": False}),
        mapping,
        base_url="js",
        shim={"backbone": {"deps": ["underscore"], "exports": "Backbone"}},
    )
    builder.set_path("main", str(js_dir / "main.js"))
    builder.set_path("jquery", ["//cdn.example.com/jquery", "vendor/jquery"])
    builder.set_use_almond(True)

    assert builder.get_configuration().to_dict() == {
        "baseUrl": "/static/js",
        "locale": "en",
        "paths": {
            "main": "/static/app/main",
            "jquery": ["//cdn.example.com/jquery", "vendor/jquery"],
        },
        "shim": {"backbone": {"deps": ["underscore"], "exports": "Backbone"}},
        "almond": True,
    }
