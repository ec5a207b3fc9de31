"""Unit tests for deriver.precedence module."""

from media_metadata.deriver.precedence import first_present, resolve


class TestFirstPresent:
    """Tests for first_present() function."""

    def test_first_value_wins(self):
        """Test that the first non-None value is returned with its label."""
        chain = [
            ("a", lambda s: None),
            ("b", lambda s: s["b"]),
            ("c", lambda s: s["c"]),
        ]
        assert first_present(chain, {"b": 2, "c": 3}) == ("b", 2)

    def test_falsy_values_count(self):
        """Test that falsy values other than None stop the scan."""
        chain = [("a", lambda s: 0), ("b", lambda s: 1)]
        assert first_present(chain, None) == ("a", 0)

    def test_stops_at_first_hit(self):
        """Test that later extractors are not evaluated."""
        calls = []

        def record(label, value):
            def extract(source):
                calls.append(label)
                return value
            return extract

        chain = [("a", record("a", None)), ("b", record("b", 1)), ("c", record("c", 2))]
        first_present(chain, None)
        assert calls == ["a", "b"]

    def test_nothing_found(self):
        """Test that an exhausted chain returns None."""
        assert first_present([("a", lambda s: None)], None) is None

    def test_empty_chain(self):
        """Test that an empty chain returns None."""
        assert first_present([], None) is None


class TestResolve:
    """Tests for resolve() function."""

    def test_returns_value_only(self):
        """Test that resolve drops the label."""
        assert resolve([("a", lambda s: "x")], None) == "x"

    def test_default(self):
        """Test the default when nothing matches."""
        assert resolve([("a", lambda s: None)], None, default=0) == 0
        assert resolve([], None) is None
