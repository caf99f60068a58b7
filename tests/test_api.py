"""End-to-end tests for find_largest."""

import random

import pytest

from largest import ScanConfig, find_largest
from largest.exceptions import RootInvalidError
from largest.formatters import TextFormatter


class TestFindLargest:
    def test_top_two_of_four(self, make_tree):
        root = make_tree({"a": 10, "b": 2000, "c": 500000, "d": 3})
        config = ScanConfig(root=root, limit=2)
        result = find_largest(config)

        assert [r.size for r in result.records] == [500000, 2000]
        lines = TextFormatter().lines(result, config)
        assert lines[0] == f"500 KB {root / 'c'}"
        assert lines[1].lstrip() == f"2 KB {root / 'b'}"

    def test_unbounded_returns_all_sorted(self, make_tree):
        sizes = {f"dir{i % 3}/f{i}.dat": (i * 37) % 101 for i in range(30)}
        root = make_tree(sizes)
        result = find_largest(ScanConfig(root=root, limit=None))
        assert len(result.records) == 30
        assert [r.size for r in result.records] == sorted(sizes.values(), reverse=True)

    @pytest.mark.parametrize("k", [0, 1, 7, 40])
    def test_limit_keeps_largest(self, make_tree, k):
        rng = random.Random(k)
        sizes = {f"d{i % 4}/f{i}": rng.randrange(0, 3000) for i in range(25)}
        root = make_tree(sizes)
        result = find_largest(ScanConfig(root=root, limit=k))

        kept = [r.size for r in result.records]
        assert len(kept) == min(k, len(sizes))
        dropped = sorted(sizes.values(), reverse=True)[len(kept):]
        if kept and dropped:
            assert min(kept) >= max(dropped)

    def test_mask_and_depth_combined(self, make_tree):
        root = make_tree({"a.log": 1, "b.txt": 500, "x/c.log": 2, "x/y/d.log": 900})
        result = find_largest(ScanConfig(root=root, mask="*.LOG", max_depth=1, limit=None))
        assert [r.path.name for r in result.records] == ["c.log", "a.log"]

    def test_relative_root_is_made_absolute(self, make_tree, monkeypatch):
        root = make_tree({"a": 5})
        monkeypatch.chdir(root.parent)
        result = find_largest(ScanConfig(root=root.name))
        assert result.root == root
        assert result.records[0].path == root / "a"

    def test_same_scan_twice_is_identical(self, make_tree):
        root = make_tree({f"d{i % 5}/f{i}": (i * 13) % 17 for i in range(40)})
        config = ScanConfig(root=root, limit=10)
        assert find_largest(config).records == find_largest(config).records

    def test_progress_does_not_change_result(self, make_tree):
        root = make_tree({f"f{i}": i * 3 for i in range(20)})
        config = ScanConfig(root=root, limit=5)
        calls = []
        with_progress = find_largest(config, on_progress=lambda s: calls.append(s.files_visited))
        assert calls
        assert with_progress.records == find_largest(config).records


class TestPartialFailure:
    def test_unreadable_subtree_does_not_abort(self, make_tree, flaky_fs):
        root = make_tree({"locked/huge": 9000, "a": 30, "b": 20, "sub/c": 10})
        fs = flaky_fs(deny_dirs=[root / "locked"])
        result = find_largest(ScanConfig(root=root, limit=2), fs=fs)
        assert [r.size for r in result.records] == [30, 20]
        assert result.stats.inaccessible_count >= 1


class TestRootValidation:
    def test_missing_root(self, tmp_path):
        with pytest.raises(RootInvalidError) as exc:
            find_largest(ScanConfig(root=tmp_path / "nope"))
        assert exc.value.reason == "does not exist"

    def test_root_is_a_file(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")
        with pytest.raises(RootInvalidError) as exc:
            find_largest(ScanConfig(root=target))
        assert exc.value.reason == "not a directory"
