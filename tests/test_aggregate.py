"""Tests for grouping files by extension.

Tests cover:
- Count and byte conservation across groups
- Case-insensitive grouping and the "no extension" group
- Ordering by total size
- Empty input and unreadable files
"""

import logging

import pytest

from filereport_data.aggregate import (
    NO_EXTENSION,
    ExtensionGroup,
    Report,
    aggregate,
    group_key,
    sort_groups,
)
from filereport_data.sources import enumerate_files


def write_files(root, spec):
    """Create files from a {relative_path: size} mapping."""
    for rel, size in spec.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)


def by_extension(report):
    return {g.extension: (g.count, g.total_bytes) for g in report.groups}


# ============================================================================
# Grouping Tests
# ============================================================================


def test_example_tree(tmp_path):
    write_files(tmp_path, {"a.txt": 10, "b.txt": 20, "c.jpg": 5000})

    report = aggregate(enumerate_files(str(tmp_path)))

    assert by_extension(report) == {".txt": (2, 30), ".jpg": (1, 5000)}
    assert [g.extension for g in report.groups] == [".jpg", ".txt"]


@pytest.mark.parametrize(
    "spec",
    [
        {"a.txt": 1},
        {"a.py": 100, "sub/b.py": 3, "sub/deeper/c.md": 0, "README": 7},
        {"x/1.BIN": 4096, "x/2.bin": 1, "y/3.Bin": 12, "z/.env": 9, "z/notes.": 2},
    ],
)
def test_counts_and_sizes_are_conserved(tmp_path, spec):
    write_files(tmp_path, spec)

    report = aggregate(enumerate_files(str(tmp_path)))

    assert report.total_files == len(spec)
    assert report.total_bytes == sum(spec.values())
    assert sum(g.count for g in report.groups) == len(spec)


def test_grouping_is_case_insensitive(tmp_path):
    write_files(tmp_path, {"a.TXT": 5, "b.txt": 6, "c.Txt": 7})

    report = aggregate(enumerate_files(str(tmp_path)))

    assert by_extension(report) == {".txt": (3, 18)}


def test_files_without_extension_use_sentinel_group(tmp_path):
    write_files(tmp_path, {"README": 11, "Makefile": 4, ".bashrc": 2, "main.c": 50})

    report = aggregate(enumerate_files(str(tmp_path)))

    groups = by_extension(report)
    assert groups[NO_EXTENSION] == (3, 17)
    assert groups[".c"] == (1, 50)
    assert "" not in groups


def test_group_key():
    assert group_key("") == NO_EXTENSION
    assert group_key(".txt") == ".txt"


def test_empty_input_produces_empty_report(tmp_path):
    report = aggregate(enumerate_files(str(tmp_path)))

    assert report.groups == []
    assert report.total_files == 0
    assert report.total_bytes == 0
    assert report.skipped == []


# ============================================================================
# Ordering Tests
# ============================================================================


def test_groups_are_non_increasing_by_size(tmp_path):
    write_files(
        tmp_path,
        {"a.log": 300, "b.log": 300, "c.csv": 50, "d.png": 2000, "e.md": 1, "f": 900},
    )

    report = aggregate(enumerate_files(str(tmp_path)))

    sizes = [g.total_bytes for g in report.groups]
    assert sizes == sorted(sizes, reverse=True)
    assert report.groups[0].extension == ".png"


def test_sort_groups_breaks_ties_by_extension():
    groups = [
        ExtensionGroup(".zip", 1, 10),
        ExtensionGroup(".avi", 2, 10),
        ExtensionGroup(".iso", 1, 99),
    ]

    ordered = sort_groups(groups)

    assert [g.extension for g in ordered] == [".iso", ".avi", ".zip"]


# ============================================================================
# Error Handling Tests
# ============================================================================


def test_unreadable_file_is_skipped_with_warning(tmp_path, caplog):
    """A file that disappears before it is stat'ed is reported, not counted."""
    write_files(tmp_path, {"kept.txt": 12})
    paths = [str(tmp_path / "kept.txt"), str(tmp_path / "vanished.txt")]
    seen_errors = []

    with caplog.at_level(logging.WARNING):
        report = aggregate(paths, on_error=seen_errors.append)

    assert by_extension(report) == {".txt": (1, 12)}
    assert len(report.skipped) == 1
    assert report.skipped[0].path == str(tmp_path / "vanished.txt")
    assert seen_errors == report.skipped
    assert "vanished.txt" in caplog.text


def test_progress_is_logged(tmp_path, caplog):
    write_files(tmp_path, {"a.txt": 1, "b.txt": 1, "c.txt": 1, "d.txt": 1})

    with caplog.at_level(logging.INFO, logger="filereport_data.aggregate"):
        aggregate(enumerate_files(str(tmp_path)), progress_interval=2)

    assert "Processed 2 files" in caplog.text
    assert "Processed 4 files" in caplog.text


def test_report_totals():
    report = Report(groups=[ExtensionGroup(".a", 2, 5), ExtensionGroup(".b", 3, 7)])

    assert report.total_files == 5
    assert report.total_bytes == 12
