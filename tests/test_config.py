"""Configuration tests."""

import json

import pytest
import yaml
from roadrouter_core.http.request import Request
from roadrouter_core.routing.router import Router
from roadrouter_core.utils.config import RouterConfig, load_config, register_routes


class TestRouterConfig:
    """Test RouterConfig class."""

    def test_defaults(self):
        """Test default values."""
        config = RouterConfig()
        assert config.method_override_header == "X-HTTP-Method-Override"
        assert config.override_methods == ["PUT", "DELETE", "PATCH"]
        assert config.quit_after_run is False
        assert config.base_path is None

    def test_from_dict_ignores_unknown(self):
        """Test unknown keys are dropped."""
        config = RouterConfig.from_dict({"namespace": "app", "unknown": 1})
        assert config.namespace == "app"

    def test_from_yaml(self, tmp_path):
        """Test loading YAML."""
        path = tmp_path / "router.yaml"
        path.write_text(yaml.safe_dump({"base_path": "/app/", "quit_after_run": True}))

        config = RouterConfig.from_yaml(str(path))
        assert config.base_path == "/app/"
        assert config.quit_after_run is True

    def test_from_json(self, tmp_path):
        """Test loading JSON."""
        path = tmp_path / "router.json"
        path.write_text(json.dumps({"domain_delimiter": "-"}))

        assert RouterConfig.from_json(str(path)).domain_delimiter == "-"

    def test_from_env(self, monkeypatch):
        """Test loading environment variables."""
        monkeypatch.setenv("ROUTER_QUIT_AFTER_RUN", "true")
        monkeypatch.setenv("ROUTER_OVERRIDE_METHODS", "put, patch")
        monkeypatch.setenv("ROUTER_NAMESPACE", "app")

        config = RouterConfig.from_env()
        assert config.quit_after_run is True
        assert config.override_methods == ["PUT", "PATCH"]
        assert config.namespace == "app"

    def test_load_config_env_wins(self, tmp_path, monkeypatch):
        """Test environment overrides file values."""
        path = tmp_path / "router.yml"
        path.write_text(yaml.safe_dump({"namespace": "file", "base_path": "/file/"}))
        monkeypatch.setenv("ROUTER_NAMESPACE", "env")

        config = load_config(str(path))
        assert config.namespace == "env"
        assert config.base_path == "/file/"

    def test_load_config_missing_file(self, tmp_path):
        """Test a missing file falls back to defaults."""
        config = load_config(str(tmp_path / "missing.yaml"))
        assert config.namespace == ""


class TestRegisterRoutes:
    """Test declarative routes."""

    def test_register_routes(self):
        """Test registering entries on a router."""
        calls = []
        router = Router()

        @router.register_controller("api.Users")
        class Users:
            def show(self, user_id):
                return f"user {user_id}"

        count = register_routes(router, [
            {"method": "GET", "pattern": "/users/{id}", "handler": "Users.show",
             "prefix": "/api", "namespace": "api"},
            {"phase": "before", "method": "GET", "pattern": "/api/users/{id}",
             "handler": lambda user_id: calls.append(user_id)},
            {"phase": "not_found", "handler": lambda: "missing"},
        ])

        assert count == 3
        assert router.dispatch(Request("GET", "/api/users/3")).result == "user 3"
        assert calls == ["3"]
        assert router.dispatch(Request("GET", "/nope")).result == "missing"

    def test_missing_handler(self):
        """Test entries without handler are rejected."""
        with pytest.raises(ValueError):
            register_routes(Router(), [{"pattern": "/"}])

    def test_unknown_phase(self):
        """Test unknown phases are rejected."""
        with pytest.raises(ValueError):
            register_routes(Router(), [{"phase": "later", "handler": "A.b"}])

    def test_routes_from_config(self):
        """Test routes declared in the router config."""
        config = RouterConfig(routes=[
            {"method": "GET|HEAD", "pattern": "/health", "handler": "Health::check"},
        ])
        router = Router(config)
        router.register_controller("Health", type("Health", (), {"check": staticmethod(lambda: "ok")}))

        assert router.dispatch(Request("GET", "/health")).result == "ok"
