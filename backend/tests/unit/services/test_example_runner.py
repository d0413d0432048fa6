"""
Unit tests for ExampleRunner output capture.
"""

import logging

from factories.repository_factories import make_example

from solid_guide.domain.interfaces import IExampleRunner
from solid_guide.services.example_runner import ExampleRunner


def test_implements_runner_interface():
    assert isinstance(ExampleRunner(), IExampleRunner)


def test_captures_printed_output(capsys):
    def demo():
        print("line one")
        print("line two")

    run = ExampleRunner().run(make_example("isp", "compliance", demo))

    assert run.output == "line one\nline two\n"
    assert run.succeeded
    assert run.lesson_code == "isp"
    assert run.kind == "compliance"
    assert capsys.readouterr().out == ""


def test_unexpected_error_is_reported_not_raised(caplog):
    def demo():
        print("before")
        raise RuntimeError("boom")

    with caplog.at_level(logging.ERROR):
        run = ExampleRunner().run(make_example("dip", "violation", demo))

    assert run.output == "before\n"
    assert run.error == "RuntimeError: boom"
    assert not run.succeeded
    assert "Example raised an unexpected error" in caplog.text


def test_overlapping_runs_capture_their_own_output(capsys):
    import sys
    import threading

    original_stdout = sys.stdout
    a_entered, release_a = threading.Event(), threading.Event()
    b_entered, release_b = threading.Event(), threading.Event()
    runs = {}

    def demo_a():
        print("A1")
        a_entered.set()
        release_a.wait(5)

    def demo_b():
        b_entered.set()
        release_b.wait(5)
        print("B1")

    runner = ExampleRunner()
    thread_a = threading.Thread(
        target=lambda: runs.update(a=runner.run(make_example("srp", "violation", demo_a)))
    )
    thread_b = threading.Thread(
        target=lambda: runs.update(b=runner.run(make_example("srp", "compliance", demo_b)))
    )

    thread_a.start()
    assert a_entered.wait(5)
    thread_b.start()
    # B must not start capturing while A still holds stdout
    assert not b_entered.wait(0.2)
    release_a.set()
    thread_a.join(5)
    assert b_entered.wait(5)
    release_b.set()
    thread_b.join(5)

    assert runs["a"].output == "A1\n"
    assert runs["b"].output == "B1\n"
    assert sys.stdout is original_stdout
    assert capsys.readouterr().out == ""
