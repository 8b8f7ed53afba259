import io

import pytest

from ossim.memory import best_fit, first_fit, main, worst_fit

BLOCKS = [100, 500, 200, 300, 600]
PROCESSES = [212, 417, 112, 426]


def _used(blocks, processes, allocation):
    used = [0] * len(blocks)
    for size, block in zip(processes, allocation):
        if block is not None:
            used[block] += size
    return used


def test_capacity_is_never_exceeded():
    results = [
        first_fit(BLOCKS, PROCESSES),
        best_fit(BLOCKS, PROCESSES),
        worst_fit(BLOCKS, PROCESSES),
    ]
    for allocation in results:
        assert len(allocation) == len(PROCESSES)
        used = _used(BLOCKS, PROCESSES, allocation)
        assert all(u <= b for u, b in zip(used, BLOCKS))


def test_input_blocks_are_not_modified():
    blocks = list(BLOCKS)
    first_fit(blocks, PROCESSES)
    best_fit(blocks, PROCESSES)
    worst_fit(blocks, PROCESSES)
    assert blocks == BLOCKS


def test_process_larger_than_every_block_is_not_allocated():
    too_big = [max(BLOCKS) + 1]
    assert first_fit(BLOCKS, too_big) == [None]
    assert best_fit(BLOCKS, too_big) == [None]
    assert worst_fit(BLOCKS, too_big) == [None]


def test_no_blocks_means_nothing_allocated():
    assert first_fit([], [1, 2]) == [None, None]
    assert best_fit([], [1, 2]) == [None, None]
    assert worst_fit([], [1, 2]) == [None, None]


def test_first_fit_takes_earliest_block_with_room():
    assert first_fit(BLOCKS, [212]) == [BLOCKS.index(500)]


def test_best_fit_takes_smallest_sufficient_block():
    assert best_fit(BLOCKS, [212]) == [BLOCKS.index(300)]


def test_worst_fit_takes_largest_block():
    assert worst_fit(BLOCKS, [212]) == [BLOCKS.index(600)]


def test_ties_go_to_the_earliest_block():
    assert best_fit([50, 50], [10]) == [0]
    assert worst_fit([50, 50], [10]) == [0]


def test_first_fit_reuses_leftover_space():
    assert first_fit([30], [10, 10, 10, 10]) == [0, 0, 0, None]


def test_main_prints_each_strategy(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n100 500\n1\n600\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "First-Fit:" in out and "Best-Fit:" in out and "Worst-Fit:" in out
    assert out.count("Process 1 -> Not Allocated") == 3


def test_main_reports_truncated_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n100"))
    assert main([]) == 1


@pytest.mark.parametrize("processes", [[1], [600, 600], [50, 50, 50]])
def test_all_strategies_agree_on_which_single_block_fits(processes):
    blocks = [600]
    assert first_fit(blocks, processes) == best_fit(blocks, processes)
    assert first_fit(blocks, processes) == worst_fit(blocks, processes)