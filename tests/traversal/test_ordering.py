"""Tests for entry partition and ordering."""

from nexus_tool.traversal import by_name, order, ordered_partition, partition


class TestOrdering:
    """Test name ordering."""

    def test_order_by_name(self, entry_factory):
        """Test that entries are sorted by codepoint order of their names."""
        entries = [entry_factory("/b"), entry_factory("/B"), entry_factory("/a"), entry_factory("/_")]

        assert [e.name for e in order(entries)] == ["B", "_", "a", "b"]

    def test_by_name_key(self, entry_factory):
        """Test the sort key."""
        assert by_name(entry_factory("/org/x.jar")) == "x.jar"

    def test_order_empty(self):
        """Test ordering nothing."""
        assert order([]) == []


class TestPartition:
    """Test file and directory partition."""

    def test_partition_preserves_relative_order(self, entry_factory):
        """Test that partition keeps input order within each group."""
        entries = [
            entry_factory("/z.txt"),
            entry_factory("/dir2/", leaf=False),
            entry_factory("/a.txt"),
            entry_factory("/dir1/", leaf=False),
        ]

        files, subdirs = partition(entries)

        assert [e.name for e in files] == ["z.txt", "a.txt"]
        assert [e.name for e in subdirs] == ["dir2", "dir1"]

    def test_ordered_partition(self, entry_factory):
        """Test that both groups come back sorted."""
        entries = [
            entry_factory("/z.txt"),
            entry_factory("/dir2/", leaf=False),
            entry_factory("/a.txt"),
            entry_factory("/dir1/", leaf=False),
        ]

        files, subdirs = ordered_partition(entries)

        assert [e.name for e in files] == ["a.txt", "z.txt"]
        assert [e.name for e in subdirs] == ["dir1", "dir2"]

    def test_partition_empty(self):
        """Test that an empty directory yields two empty groups."""
        assert partition([]) == ([], [])
