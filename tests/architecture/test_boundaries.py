from pytest_archon import archrule


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from validation, the collector, the reader or config.
    """
    (
        archrule("primitives_isolation")
        .match("fieldcheck.primitives*")
        .should_not_import("fieldcheck.validation*")
        .should_not_import("fieldcheck.parsing*")
        .should_not_import("fieldcheck.collector*")
        .should_not_import("fieldcheck.reader*")
        .should_not_import("fieldcheck.config*")
        .check("fieldcheck")
    )


def test_parsing_layering() -> None:
    """
    Parsers only depend on primitives.
    """
    (
        archrule("parsing_layering")
        .match("fieldcheck.parsing*")
        .should_not_import("fieldcheck.validation*")
        .should_not_import("fieldcheck.collector*")
        .should_not_import("fieldcheck.reader*")
        .should_not_import("fieldcheck.config*")
        .check("fieldcheck")
    )


def test_validation_layering() -> None:
    """
    Validators produce results; they know nothing about accumulation or
    typed extraction.
    """
    (
        archrule("validation_layering")
        .match("fieldcheck.validation*")
        .should_not_import("fieldcheck.collector*")
        .should_not_import("fieldcheck.reader*")
        .should_not_import("fieldcheck.config*")
        .check("fieldcheck")
    )


def test_reader_independence() -> None:
    """
    The typed reader sits below the collector and must not import it.
    """
    (
        archrule("reader_independence")
        .match("fieldcheck.reader*")
        .should_not_import("fieldcheck.collector*")
        .should_not_import("fieldcheck.validation*")
        .should_not_import("fieldcheck.config*")
        .check("fieldcheck")
    )


def test_collector_ignores_config() -> None:
    """
    Configuration binding is an outer surface built on the collector.
    """
    (
        archrule("collector_ignores_config")
        .match("fieldcheck.collector*")
        .should_not_import("fieldcheck.config*")
        .check("fieldcheck")
    )
