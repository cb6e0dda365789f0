from badminton.report import render_report, report_filename


def test_render_report(teams, make_round, make_schedule):
    t1, t2, t3, t4 = teams
    schedule = make_schedule([make_round(1, (t1, t2), (t3, t4)), make_round(2, (t1, t3))])
    text = render_report(schedule)
    lines = text.splitlines()

    assert lines[0] == "Badminton Doubles Schedule"
    assert "Round 1" in lines
    assert "Court 1: Team 1 (M1 + F1) VS Team 2 (M2 + F2)" in lines
    assert "Court 2: Team 3 (M3 + F3) VS Team 4 (M4 + F4)" in lines
    assert "Court 1: Team 1 (M1 + F1) VS Team 3 (M3 + F3)" in lines
    assert "Total matches: 20 | Teams: 4 | Ideal per team: 5" in lines
    assert "Head-to-head: unique 3 | repeated 0 | never 3" in lines
    assert "Team 2 (M2 + F2): played 1 (target 5) needs adjustment" in lines
    assert text.endswith("\n")


def test_empty_round_still_listed(teams, make_round, make_schedule):
    schedule = make_schedule([make_round(1)])
    assert "Round 1" in render_report(schedule).splitlines()


def test_report_filename(make_schedule):
    assert report_filename(make_schedule([])) == "badminton-schedule-test.txt"
