"""
Unit tests for the Liskov Substitution lesson snippets.
"""

import pytest

from solid_guide.core.exceptions import UnsupportedOperationError
from solid_guide.principles.lsp import compliance, violation


class TestReadOnlyFileViolation:
    def test_demo_breaks_on_substituted_subtype(self, capsys):
        violation.demo()

        assert capsys.readouterr().out == (
            "Wrote 5 characters to notes.txt\n"
            "Error: Cannot write to a read-only file\n"
        )

    def test_read_only_file_is_a_file_but_refuses_write(self):
        read_only = violation.ReadOnlyFile("config.ini", "debug=false")

        assert isinstance(read_only, violation.File)
        with pytest.raises(UnsupportedOperationError, match="read-only"):
            read_only.write("x")
        assert read_only.read() == "debug=false"

    def test_files_before_the_read_only_one_are_written(self, capsys):
        plain = violation.File("a.txt")

        with pytest.raises(UnsupportedOperationError):
            violation.save_all([plain, violation.ReadOnlyFile("b.txt")], "data")

        assert plain.read() == "data"


class TestReadOnlyFileCompliance:
    def test_demo_writes_and_reads_every_file(self, capsys):
        compliance.demo()

        assert capsys.readouterr().out == (
            "Wrote 5 characters to notes.txt\n"
            "Wrote 5 characters to todo.txt\n"
            "notes.txt: hello\n"
            "todo.txt: hello\n"
            "config.ini: debug=false\n"
        )

    def test_read_only_file_does_not_promise_write(self):
        read_only = compliance.ReadOnlyFile("config.ini", "debug=false")

        assert isinstance(read_only, compliance.ReadableFile)
        assert not isinstance(read_only, compliance.WritableFile)
        assert not hasattr(read_only, "write")

    def test_writable_file_substitutes_for_readable(self, capsys):
        writable = compliance.WritableFile("notes.txt", "old")

        assert isinstance(writable, compliance.ReadableFile)
        assert writable.read() == "old"
        writable.write("new")
        assert writable.read() == "new"
