from __future__ import annotations

import pytest

from json_to_php.errors import OutputExistsError, OutputWriteError
from json_to_php.pipeline import AtomicWriter, OutputConfig, OutputMode, write_output

CODE = "<?php\n\nclass A {\n}\n"


def test_write_creates_parent_directories(tmp_path):
    target = tmp_path / "out" / "models" / "A.php"
    AtomicWriter().write(target, CODE)
    assert target.read_text(encoding="utf-8") == CODE


def test_force_mode_overwrites(tmp_path):
    target = tmp_path / "A.php"
    target.write_text("old", encoding="utf-8")
    write_output(target, CODE)
    assert target.read_text(encoding="utf-8") == CODE


def test_error_mode_keeps_existing_file(tmp_path):
    target = tmp_path / "A.php"
    target.write_text("old", encoding="utf-8")
    writer = AtomicWriter(OutputConfig(mode=OutputMode.ERROR_IF_EXISTS))
    with pytest.raises(OutputExistsError):
        writer.write(target, CODE)
    assert target.read_text(encoding="utf-8") == "old"


@pytest.mark.parametrize("content", ["class A {}\n", "<?php\nclass A {\n"])
def test_invalid_content_is_not_written(tmp_path, content):
    target = tmp_path / "A.php"
    with pytest.raises(OutputWriteError):
        AtomicWriter().write(target, content)
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize(
    "comment",
    ["// Source: x{.json", "// Generated by json_to_php 1.0.0: json_to_php {a}.json out.php", "  // }}"],
)
def test_braces_in_comments_are_ignored(tmp_path, comment):
    content = f"<?php\n{comment}\nclass A {{\n}}\n"
    target = tmp_path / "A.php"
    AtomicWriter().write(target, content)
    assert target.read_text(encoding="utf-8") == content


def test_unbalanced_code_next_to_comment(tmp_path):
    with pytest.raises(OutputWriteError):
        AtomicWriter().write(tmp_path / "A.php", "<?php\n// }\nclass A {\n")


def test_validation_can_be_disabled(tmp_path):
    target = tmp_path / "A.php"
    AtomicWriter(OutputConfig(validate_before_write=False)).write(target, "plain text")
    assert target.read_text(encoding="utf-8") == "plain text"


def test_custom_validator(tmp_path):
    def reject(content):
        raise OutputWriteError("rejected")

    with pytest.raises(OutputWriteError, match="rejected"):
        AtomicWriter(validate_php=reject).write(tmp_path / "A.php", CODE)


def test_unwritable_target(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(OutputWriteError):
        AtomicWriter().write(blocker / "A.php", CODE)
    assert [p.name for p in tmp_path.iterdir()] == ["file"]
