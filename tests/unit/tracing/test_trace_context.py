import contextvars

from stencil.tracing.context import get_trace_context, set_trace_context, trace_span


def test_no_context_by_default():
    ctx = contextvars.Context()
    assert ctx.run(get_trace_context) == (None, None)


def test_set_trace_context():
    def scenario():
        set_trace_context(trace_id="t", span_id="s")
        set_trace_context(span_id="s2")
        return get_trace_context()

    assert contextvars.Context().run(scenario) == ("t", "s2")


def test_trace_span_nests_and_restores():
    def scenario():
        with trace_span() as outer:
            assert get_trace_context() == outer
            with trace_span() as inner:
                assert inner.trace_id == outer.trace_id
                assert inner.span_id != outer.span_id
            assert get_trace_context() == outer
        return get_trace_context()

    assert contextvars.Context().run(scenario) == (None, None)


def test_trace_span_uses_given_trace_id():
    def scenario():
        with trace_span("abc") as span:
            return span.trace_id

    assert contextvars.Context().run(scenario) == "abc"
