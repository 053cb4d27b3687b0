import pytest
from unittest.mock import Mock

from src.modules.runtime import Runtime
from src.modules.scenario.model import (
    DocString, Location, Scenario, Step, StepMatch, StepStatus, Table
)
from src.modules.walker import ListenerErrorPolicy, TreeWalker, WalkerConfig
from tests.utils.listeners import make_listener, messages_of

BRACKETS = [
    "before_step_result", "after_step_result",
    "before_step_name", "after_step_name",
    "before_multiline_arg", "after_multiline_arg",
    "before_exception", "after_exception",
]


def _step_args(multiline_arg=None, status=StepStatus.PASSED, exception=None):
    return (
        "Given",
        StepMatch("a registered user"),
        multiline_arg,
        status,
        exception,
        4,
        False,
        Location("features/login.feature", 3),
    )


def test_puts_and_step_result_reach_only_capable_listeners(runtime, call_log):
    a = make_listener("A", ["step_result", "before_step_result", "after_step_result"], call_log)
    b = make_listener("B", ["puts"], call_log)
    walker = TreeWalker(runtime, [a, b])

    walker.puts("hello")
    assert call_log == [("B", "puts", ("hello",))]

    call_log.clear()
    args = _step_args()
    walker.visit_step_result(*args)
    assert call_log == [
        ("A", "before_step_result", args),
        ("A", "after_step_result", args),
    ]


def test_step_result_nesting_order(runtime, call_log):
    listener = make_listener("L", BRACKETS, call_log)
    walker = TreeWalker(runtime, [listener])

    walker.visit_step_result(*_step_args(
        DocString("some text"), StepStatus.FAILED, AssertionError("boom")
    ))

    assert messages_of(call_log) == [
        "before_step_result",
        "before_step_name",
        "after_step_name",
        "before_multiline_arg",
        "after_multiline_arg",
        "before_exception",
        "after_exception",
        "after_step_result",
    ]


def test_step_name_and_exception_emit_inner_atomic_events(runtime, call_log):
    listener = make_listener("L", BRACKETS + ["step_name", "exception", "doc_string"], call_log)
    walker = TreeWalker(runtime, [listener])
    error = AssertionError("boom")

    walker.visit_step_result(*_step_args(DocString("text"), StepStatus.FAILED, error))

    assert messages_of(call_log) == [
        "before_step_result",
        "before_step_name", "step_name", "after_step_name",
        "before_multiline_arg", "doc_string", "after_multiline_arg",
        "before_exception", "exception", "after_exception",
        "after_step_result",
    ]
    assert ("L", "exception", (error, StepStatus.FAILED)) in call_log
    assert ("L", "doc_string", ("text",)) in call_log


def test_step_name_arguments(runtime, call_log):
    listener = make_listener("L", ["step_name"], call_log)
    walker = TreeWalker(runtime, [listener])
    args = _step_args()

    walker.visit_step_result(*args)

    keyword, step_match, _, status, _, indent, background, location = args
    assert call_log == [("L", "step_name", (keyword, step_match, status, indent, background, location))]


def test_table_multiline_arg_is_walked_row_by_row(runtime, call_log):
    listener = make_listener(
        "L", ["before_table_row", "after_table_row", "table_cell_value"], call_log
    )
    walker = TreeWalker(runtime, [listener])

    walker.visit_multiline_arg(Table([["name", "role"], ["ann", "admin"]]))

    assert call_log == [
        ("L", "before_table_row", (["name", "role"],)),
        ("L", "table_cell_value", ("name",)),
        ("L", "table_cell_value", ("role",)),
        ("L", "after_table_row", (["name", "role"],)),
        ("L", "before_table_row", (["ann", "admin"],)),
        ("L", "table_cell_value", ("ann",)),
        ("L", "table_cell_value", ("admin",)),
        ("L", "after_table_row", (["ann", "admin"],)),
    ]


def test_embed(runtime, call_log):
    listener = make_listener("L", ["embed"], call_log)

    TreeWalker(runtime, [listener]).embed("shot.png", "image/png", "Screenshot")

    assert call_log == [("L", "embed", ("shot.png", "image/png", "Screenshot"))]


def test_unknown_visit_methods_are_forwarded(runtime, call_log):
    listener = make_listener("L", ["custom_node", "before_group", "after_group"], call_log)
    walker = TreeWalker(runtime, [listener])

    result = walker.visit_custom_node(1, 2)
    walker.visit_group("g", work=lambda: call_log.append(("work", "run", ())))

    assert result is walker
    assert call_log == [
        ("L", "custom_node", (1, 2)),
        ("L", "before_group", ("g",)),
        ("work", "run", ()),
        ("L", "after_group", ("g",)),
    ]


def test_forwarded_bracket_closes_when_work_raises(runtime, call_log):
    listener = make_listener("L", ["before_group", "after_group"], call_log)
    walker = TreeWalker(runtime, [listener])

    def work():
        raise RuntimeError("node failed")

    with pytest.raises(RuntimeError, match="node failed"):
        walker.visit_group(work=work)

    assert messages_of(call_log) == ["before_group", "after_group"]


def test_other_unknown_attributes_are_not_forwarded(runtime):
    walker = TreeWalker(runtime)

    assert not hasattr(walker, "render")
    with pytest.raises(AttributeError):
        walker.render()


def test_notification_order_is_stable_across_runs(runtime, call_log):
    listeners = [make_listener(name, BRACKETS, call_log) for name in ("x", "y", "z")]
    walker = TreeWalker(runtime, listeners)

    walker.visit_step_result(*_step_args())
    first = list(call_log)
    call_log.clear()
    walker.visit_step_result(*_step_args())

    assert call_log == first
    assert [who for who, message, _ in first if message == "before_step_result"] == ["x", "y", "z"]


def test_execute_runs_steps_inside_hooks(call_log):
    runtime = Mock()
    runtime.with_hooks.side_effect = lambda scenario, skip_hooks, body: body()
    runtime.invoke_step.side_effect = lambda step: setattr(step, "status", StepStatus.PASSED)
    listener = make_listener("L", ["before_steps", "before_step_result", "after_steps"], call_log)
    scenario = Scenario("login", [Step("Given", "one", StepMatch("one")), Step("When", "two", StepMatch("two"))])
    walker = TreeWalker(runtime, [listener])

    walker.execute(scenario, skip_hooks=False)

    runtime.with_hooks.assert_called_once()
    assert runtime.with_hooks.call_args.args[:2] == (scenario, False)
    assert runtime.invoke_step.call_count == 2
    assert messages_of(call_log) == ["before_steps", "before_step_result", "before_step_result", "after_steps"]


def test_execute_failed_scenario_reports_without_invoking(runtime, call_log):
    side_effects = []
    failed = Step(
        "Given", "it broke", StepMatch("it broke"),
        status=StepStatus.FAILED, exception=AssertionError("earlier failure")
    )
    pending = Step("Then", "more", StepMatch("more", fn=lambda: side_effects.append("ran")))
    listener = make_listener("L", ["before_step_result"], call_log)

    TreeWalker(runtime, [listener]).execute(Scenario("broken", [failed, pending]))

    assert side_effects == []
    assert pending.invocation_skipped
    assert pending.status == StepStatus.SKIPPED
    assert failed.status == StepStatus.FAILED
    statuses = [args[3] for _, _, args in call_log]
    assert statuses == [StepStatus.FAILED, StepStatus.SKIPPED]


def test_dry_run_skips_hooks_and_invocation(call_log):
    runtime = Mock()
    runtime.with_hooks.side_effect = lambda scenario, skip_hooks, body: body()
    listener = make_listener("L", ["before_step_result"], call_log)
    scenario = Scenario("dry", [Step("Given", "x", StepMatch("x", fn=lambda: None))])

    TreeWalker(runtime, [listener], WalkerConfig(dry_run=True)).execute(scenario)

    assert runtime.with_hooks.call_args.args[1] is True
    runtime.invoke_step.assert_not_called()
    assert call_log[0][2][3] == StepStatus.SKIPPED


def test_hook_failure_propagates_after_closing_brackets(test_logger, call_log):
    runtime = Runtime(test_logger)
    runtime.register_after_hook("teardown", lambda scenario: call_log.append(("hook", "after", ())))

    def explode(scenario):
        raise RuntimeError("before hook failed")

    runtime.register_before_hook("setup", explode)
    listener = make_listener("L", ["before_feature_element", "after_feature_element"], call_log)
    walker = TreeWalker(runtime, [listener])

    with pytest.raises(RuntimeError, match="before hook failed"):
        Scenario("hooked", [Step("Given", "x")]).accept(walker)

    assert messages_of(call_log) == ["before_feature_element", "after", "after_feature_element"]


def test_listener_failure_policy_comes_from_configuration(runtime):
    class Broken:
        def puts(self, *args):
            raise RuntimeError("boom")

    isolating = TreeWalker(runtime, [Broken()])
    raising = TreeWalker(runtime, [Broken()], WalkerConfig(listener_errors=ListenerErrorPolicy.RAISE))

    isolating.puts("ok")
    with pytest.raises(RuntimeError, match="boom"):
        raising.puts("ok")


def test_walker_defaults_to_runtime_logger(runtime, test_logger):
    walker = TreeWalker(runtime)

    assert walker.logger is test_logger
    assert walker.configuration == WalkerConfig()


def test_execute_accepts_scenario_without_name_or_step_list(runtime, test_logger):
    visited = []

    class Steps:
        def accept(self, visitor):
            visited.append(visitor)

    class BareScenario:
        steps = Steps()

        def failed(self):
            return False

        def skip_invocation(self):
            visited.append("skipped")

    walker = TreeWalker(runtime)

    walker.execute(BareScenario())

    assert visited == [walker]
    assert "SCENARIO: BareScenario" in test_logger.get_logs()


def test_execute_logs_scenario_name(runtime, test_logger):
    TreeWalker(runtime).execute(Scenario("login", []))

    assert "SCENARIO: login" in test_logger.get_logs()
