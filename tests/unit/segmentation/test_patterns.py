import pytest

from question_kit.segmentation.patterns import (
    HEADER_PATTERNS,
    HeaderPattern,
    is_header,
    match_header,
)


class TestMatchHeader:
    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("RA04_a Explain the model", "ra_code"),
            ("(RA04_a) Explain the model", "ra_code"),
            ("ra12_b lower case", "ra_code"),
            ("RA4 something", "ra_loose"),
            ("(RA 04 something", "ra_loose"),
            ("R.A. 4 Describe", "ra_dotted"),
            ("R.A.4", "ra_dotted"),
            ("Actividad 3: instala el servidor", "activity"),
            ("ACTIVIDAD 10", "activity"),
            ("Pregunta 1: what is 2+2?", "question"),
            ("Pregunta. 2 what is 3+3?", "question"),
            ("pregunta3", "question"),
            ("PARTE A", "part"),
            ("Parte uno", "part"),
            ("1. What is X?", "enumerator"),
            ("12) Second item", "enumerator"),
        ],
    )
    def test_recognized_headers(self, line: str, expected: str) -> None:
        pattern = match_header(line)

        assert pattern is not None
        assert pattern.name == expected

    @pytest.mark.parametrize(
        "line",
        [
            "1.5 is a constant",
            "3.14159",
            "2)no space",
            "PARTE \u00danica",
            "\u0661. item",
            "Actividad \u0663",
            "See RA04_a for details",
            "This is Pregunta 1 in the middle",
            "Actividad sin numero",
            "PARTE",
            "Plain body text",
            "",
        ],
    )
    def test_non_headers(self, line: str) -> None:
        assert match_header(line) is None
        assert is_header(line) is False

    def test_leading_whitespace_allowed(self) -> None:
        assert is_header("   Pregunta 4")
        assert is_header("\t1. indented")

    def test_leading_byte_order_mark_allowed(self) -> None:
        assert match_header("\ufeffRA01_a Explain").name == "ra_code"  # type: ignore[union-attr]
        assert is_header("\ufeff 1. item")

    def test_first_matching_pattern_wins(self) -> None:
        """RA04_a also matches the looser RA forms; the strict one comes first."""
        assert match_header("RA04_a").name == "ra_code"  # type: ignore[union-attr]
        assert HEADER_PATTERNS[1].matches("RA04_a")

    def test_stops_at_first_match(self) -> None:
        calls: list[str] = []

        class Recording(HeaderPattern):
            def matches(self, line: str) -> bool:
                calls.append(self.name)
                return super().matches(line)

        patterns = [
            Recording(name=p.name, regex=p.regex, example=p.example)
            for p in HEADER_PATTERNS
        ]

        match_header("Actividad 1", patterns)

        assert calls == ["ra_code", "ra_loose", "ra_dotted", "activity"]

    def test_custom_pattern_list(self) -> None:
        assert match_header("1. Item", patterns=[]) is None


class TestHeaderPatterns:
    def test_priority_order(self) -> None:
        assert [p.name for p in HEADER_PATTERNS] == [
            "ra_code",
            "ra_loose",
            "ra_dotted",
            "activity",
            "question",
            "part",
            "enumerator",
        ]

    def test_each_example_matches_its_own_pattern(self) -> None:
        for pattern in HEADER_PATTERNS:
            assert pattern.matches(pattern.example), pattern.name

    def test_pattern_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            HEADER_PATTERNS[0].name = "changed"  # type: ignore
