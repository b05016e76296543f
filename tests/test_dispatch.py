import pytest


def test_single_argument_is_always_payload(registry, sink):
    logger = registry.get("db")
    logger("hello")
    logger("info")

    assert sink.calls == [("log", ("hello",)), ("log", ("info",))]


def test_level_then_payload(registry, sink):
    logger = registry.get("db")
    logger("warn", "disk full")
    logger("debug", "a", 1, None)

    assert sink.calls == [("warn", ("disk full",)), ("debug", ("a", 1, None))]


def test_unknown_first_argument_is_kept(registry, sink):
    logger = registry.get("db")
    logger("verbose", "x")
    logger(42, "answer")

    assert sink.calls == [("log", ("verbose", "x")), ("log", (42, "answer"))]


def test_no_arguments_logs_nothing_at_log_level(registry, sink):
    registry.get("db")()
    assert sink.calls == [("log", ())]


def test_unhashable_first_argument(registry, sink):
    registry.get("db")(["error"], "x")
    assert sink.calls == [("log", (["error"], "x"))]


def test_zero_severity_is_not_a_level(registry, sink):
    registry.levels["off"] = 0
    registry.extend_all()

    registry.get("db")("off", "x")
    assert sink.calls == [("log", ("off", "x"))]


def test_replaced_dispatch_applies_to_existing_loggers(registry, sink):
    logger = registry.get("db")
    seen = []
    registry.hooks.dispatch = lambda reg, name, args, logger=None: seen.append((name, args, logger))

    logger("error", "boom")

    assert seen == [("db", ["error", "boom"], logger)]
    assert sink.calls == []


def test_registry_dispatch_by_name(registry, sink):
    registry.get("db")
    registry.dispatch("db", ("error", "boom"))
    assert sink.calls == [("error", ("boom",))]


def test_dispatch_for_unknown_name_or_unbound_logger_is_dropped(registry, sink):
    registry.dispatch("nobody", ("error", "boom"))
    registry.new("unregistered")("error", "boom")
    assert sink.calls == []


def test_sink_errors_propagate():
    from anylog.core.registry import Registry

    class Broken:
        def log(self, *args):
            raise RuntimeError("sink down")

    logger = Registry(sink=Broken()).get("db")
    with pytest.raises(RuntimeError, match="sink down"):
        logger("x")


def test_renamed_logger_dispatches_on_itself(registry, sink):
    registry.hooks.create = lambda reg, name, config=None: reg.hooks.ext(reg, reg.hooks.new(reg, "renamed"))

    logger = registry.get("db")
    assert logger.name == "renamed"
    logger("error", "boom")

    assert sink.calls == [("error", ("boom",))]
