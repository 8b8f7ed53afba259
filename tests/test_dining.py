import io

import pytest

from ossim.dining import EATING, WAITING, main, one_at_a_time, two_at_a_time

HUNGRY = [2, 4, 5]


def _eaters(events):
    return [p for kind, p in events if kind == EATING]


@pytest.mark.parametrize("strategy", [one_at_a_time, two_at_a_time])
def test_every_hungry_philosopher_eats_once_in_order(strategy):
    assert _eaters(strategy(5, HUNGRY)) == HUNGRY


def test_one_at_a_time_lists_all_waiting_first():
    events = one_at_a_time(5, HUNGRY)
    assert events == [(WAITING, p) for p in HUNGRY] + [(EATING, p) for p in HUNGRY]


def test_two_at_a_time_serves_pairs_then_lists_the_rest():
    events = two_at_a_time(5, HUNGRY)
    assert events == [
        (EATING, 2),
        (EATING, 4),
        (WAITING, 5),
        (EATING, 5),
    ]


def test_two_at_a_time_never_has_more_than_two_eaters_between_waits():
    events = two_at_a_time(10, [1, 2, 3, 4, 5, 6, 7])
    run = 0
    for kind, _ in events:
        run = run + 1 if kind == EATING else 0
        assert run <= 2
    assert _eaters(events) == [1, 2, 3, 4, 5, 6, 7]


@pytest.mark.parametrize("strategy", [one_at_a_time, two_at_a_time])
def test_no_hungry_philosophers_gives_no_events(strategy):
    assert strategy(5, []) == []


@pytest.mark.parametrize("strategy", [one_at_a_time, two_at_a_time])
@pytest.mark.parametrize("hungry", [[0], [6], [2, 2]])
def test_bad_positions_are_rejected(strategy, hungry):
    with pytest.raises(ValueError):
        strategy(5, hungry)


def test_no_philosophers_is_rejected():
    with pytest.raises(ValueError):
        one_at_a_time(0, [])


def test_main_runs_menu(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n2\n1 3\n1\n9\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Philosopher 1 is granted to eat" in out
    assert "Philosopher 3 has finished eating" in out
    assert "Invalid choice" in out
    assert "Exiting..." in out


def test_main_rejects_out_of_range_position(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n1\n7\n"))
    assert main([]) == 1