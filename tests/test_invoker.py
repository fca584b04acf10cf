"""Invoker tests."""

import pytest
from roadrouter_core.routing.invoker import (
    ControllerMethod,
    ControllerRegistry,
    DirectCallable,
    Invoker,
    UnknownReference,
    parse_handler,
)


class UserController:
    """Controller used by the tests."""

    instances = 0

    def __init__(self):
        UserController.instances += 1

    def show(self, user_id):
        return f"user {user_id}"

    @staticmethod
    def listing(page="1"):
        return f"page {page}"


class TestParseHandler:
    """Test handler reference parsing."""

    def test_callable(self):
        """Test callables are wrapped directly."""
        handler = lambda: "ok"
        assert parse_handler(handler) == DirectCallable(handler)

    def test_dotted_reference(self):
        """Test Type.method references."""
        assert parse_handler("UserController.show") == ControllerMethod(
            "UserController", "show", static=False
        )

    def test_namespaced_reference(self):
        """Test the method is taken after the last dot."""
        ref = parse_handler("admin.UserController.show")
        assert ref.controller == "admin.UserController"
        assert ref.method == "show"

    def test_at_reference(self):
        """Test Type@method references."""
        assert parse_handler("UserController@show") == ControllerMethod(
            "UserController", "show", static=False
        )

    def test_static_reference(self):
        """Test Type::method references."""
        assert parse_handler("admin.UserController::listing") == ControllerMethod(
            "admin.UserController", "listing", static=True
        )

    def test_unknown_shape(self):
        """Test strings of no known shape."""
        assert parse_handler("nothing") == UnknownReference("nothing")
        assert parse_handler("Controller.") == UnknownReference("Controller.")

    def test_wrong_type(self):
        """Test non-string, non-callable handlers are rejected."""
        with pytest.raises(TypeError):
            parse_handler(42)


class TestControllerRegistry:
    """Test controller registry."""

    def test_register_directly(self):
        """Test registering a factory."""
        registry = ControllerRegistry()
        registry.register("Users", UserController)
        assert registry.get("Users") is UserController
        assert "Users" in registry
        assert len(registry) == 1

    def test_register_decorator(self):
        """Test registering with a decorator."""
        registry = ControllerRegistry()

        @registry.register("admin.Dashboard")
        class Dashboard:
            pass

        assert registry.get("admin.Dashboard") is Dashboard
        assert registry.names() == ["admin.Dashboard"]

    def test_missing(self):
        """Test unknown names."""
        assert ControllerRegistry().get("Missing") is None


class TestInvoker:
    """Test handler invocation."""

    def setup_method(self):
        self.registry = ControllerRegistry()
        self.registry.register("Users", UserController)
        self.invoker = Invoker(self.registry)

    def test_direct_callable_positional(self):
        """Test params are passed positionally in order."""
        ref = parse_handler(lambda a, b: f"{a}-{b}")
        assert self.invoker.invoke(ref, ["x", "y"]) == "x-y"

    def test_instance_method(self):
        """Test controllers are built per call."""
        before = UserController.instances
        result = self.invoker.invoke(parse_handler("Users.show"), ["7"])
        assert result == "user 7"
        assert UserController.instances == before + 1

    def test_static_method(self):
        """Test static references skip instantiation."""
        before = UserController.instances
        result = self.invoker.invoke(parse_handler("Users::listing"), ["3"])
        assert result == "page 3"
        assert UserController.instances == before

    def test_missing_controller(self):
        """Test unregistered controllers yield no result."""
        assert self.invoker.invoke(parse_handler("Ghost.show"), ["1"]) is None

    def test_missing_method(self):
        """Test missing methods yield no result."""
        assert self.invoker.invoke(parse_handler("Users.delete"), ["1"]) is None

    def test_unknown_reference(self):
        """Test unknown references yield no result."""
        assert self.invoker.invoke(UnknownReference("nothing")) is None

    def test_empty_registry_kept(self):
        """Test an empty registry is used rather than replaced."""
        registry = ControllerRegistry()
        invoker = Invoker(registry)
        registry.register("Users", UserController)

        assert invoker.registry is registry
        assert invoker.invoke(parse_handler("Users.show"), ["9"]) == "user 9"
