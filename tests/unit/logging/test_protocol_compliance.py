from stencil.logging.logger import Logger
from stencil.logging.protocols import LoggerProtocol
from stencil.sinks.protocols import LogEventSink
from stencil.sinks.stdlib import StdlibLoggingSink

from tests.conftest_protocols import assert_implements_protocol


def test_logger_protocol_structural(sink, settings):
    logger = Logger(sink, settings=settings)
    assert_implements_protocol(LoggerProtocol, logger)


def test_contextual_logger_protocol_structural(sink, settings):
    child = Logger(sink, settings=settings).for_context("A", 1)
    assert_implements_protocol(LoggerProtocol, child)


def test_sinks_are_runtime_checkable(sink):
    assert isinstance(sink, LogEventSink)
    assert isinstance(StdlibLoggingSink("stencil.tests"), LogEventSink)
    assert not isinstance(object(), LogEventSink)
