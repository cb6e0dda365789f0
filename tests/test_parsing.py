from badminton.parsing import build_config, parse_court_count, parse_fixed_groups, parse_names


class TestParseNames:
    def test_trims_and_drops_blank_lines(self):
        assert parse_names("  Amy \n\nBen\r\n   \nCara") == ["Amy", "Ben", "Cara"]

    def test_empty(self):
        assert parse_names("") == []
        assert parse_names(None) == []


class TestParseFixedGroups:
    def test_comma_separated(self):
        assert parse_fixed_groups("A, B\n\nC,D\n") == [("A", "B"), ("C", "D")]

    def test_full_width_comma(self):
        assert parse_fixed_groups("小明，小華") == [("小明", "小華")]

    def test_keeps_odd_sized_groups(self):
        assert parse_fixed_groups("A\nB, C, D\n , ") == [("A",), ("B", "C", "D")]


def test_build_config():
    config = build_config("M1\nM2", "F1", "M1, F1", 3, "simple")
    assert config.male_players == ["M1", "M2"]
    assert config.female_players == ["F1"]
    assert config.fixed_groups == [("M1", "F1")]
    assert config.court_count == 3
    assert config.strategy == "simple"


class TestParseCourtCount:
    def test_numeric(self):
        assert parse_court_count(" 3 ") == 3
        assert parse_court_count(4) == 4

    def test_unreadable_is_zero(self):
        assert parse_court_count("") == 0
        assert parse_court_count("two") == 0
