from src.modules.walker.registry import ListenerRegistry, supports
from tests.utils.listeners import make_listener


def test_registry_keeps_insertion_order(call_log):
    listeners = [make_listener(name, [], call_log) for name in ("c", "a", "b")]
    registry = ListenerRegistry(listeners)

    assert [listener.name for listener in registry] == ["c", "a", "b"]
    assert len(registry) == 3


def test_registry_is_fixed_after_construction(call_log):
    listeners = [make_listener("a", [], call_log)]
    registry = ListenerRegistry(listeners)
    listeners.append(make_listener("b", [], call_log))

    assert len(registry) == 1


def test_capable_filters_by_method(call_log):
    a = make_listener("a", ["puts"], call_log)
    b = make_listener("b", ["embed"], call_log)
    c = make_listener("c", ["puts", "embed"], call_log)
    registry = ListenerRegistry([a, b, c])

    assert list(registry.capable("puts")) == [a, c]
    assert list(registry.capable("embed")) == [b, c]
    assert list(registry.capable("step_result")) == []


def test_supports_requires_callable_attribute():
    class Listener:
        puts = "not a handler"

        def embed(self, *args):
            pass

    assert supports(Listener(), "embed")
    assert not supports(Listener(), "puts")
    assert not supports(Listener(), "step_name")
