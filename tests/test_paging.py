import io

import pytest

from ossim.paging import fifo, lru, main, optimal

REFERENCES = [
    [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2],
    [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5],
    [5, 5, 5, 5],
    [1, 2, 1, 3, 1, 4, 1, 5],
]


@pytest.mark.parametrize("pages", REFERENCES)
@pytest.mark.parametrize("frame_count", [1, 2, 3, 4])
def test_fault_count_is_bounded(pages, frame_count):
    results = [fifo(pages, frame_count), lru(pages, frame_count), optimal(pages, frame_count)]
    for result in results:
        assert len(set(pages)) <= result.faults <= len(pages)


@pytest.mark.parametrize("pages", REFERENCES)
def test_enough_frames_fault_once_per_distinct_page(pages):
    distinct = len(set(pages))
    assert fifo(pages, distinct).faults == distinct
    assert lru(pages, distinct).faults == distinct
    assert optimal(pages, distinct).faults == distinct


@pytest.mark.parametrize("pages", REFERENCES)
def test_snapshots_have_frame_count_entries_without_duplicates(pages):
    results = [fifo(pages, 3), lru(pages, 3), optimal(pages, 3)]
    for result in results:
        for snapshot in result.snapshots:
            assert len(snapshot) == 3
            loaded = [page for page in snapshot if page is not None]
            assert len(loaded) == len(set(loaded))


def test_faulting_pages_appear_in_their_snapshots():
    pages = [1, 2, 3, 4, 5]
    results = [fifo(pages, 2), lru(pages, 2), optimal(pages, 2)]
    for result in results:
        assert [page in snap for page, snap in zip(pages, result.snapshots)] == [True] * 5


@pytest.mark.parametrize("pages", REFERENCES)
@pytest.mark.parametrize("frame_count", [1, 2, 3])
def test_optimal_never_faults_more_than_the_others(pages, frame_count):
    best = optimal(pages, frame_count).faults
    assert best <= fifo(pages, frame_count).faults
    assert best <= lru(pages, frame_count).faults


def test_fifo_replaces_oldest_page():
    result = fifo([1, 2, 3, 4], 3)
    assert result.snapshots == (
        (1, None, None),
        (1, 2, None),
        (1, 2, 3),
        (4, 2, 3),
    )


def test_lru_keeps_recently_used_page():
    assert lru([1, 2, 1, 3], 2).snapshots[-1] == (1, 3)


def test_optimal_evicts_page_never_used_again():
    assert optimal([1, 2, 3, 1], 2).snapshots[-1] == (1, 3)


def test_empty_reference_string_has_no_faults():
    assert fifo([], 3).faults == 0
    assert lru([], 3).faults == 0
    assert optimal([], 3).faults == 0


def test_zero_frames_is_rejected():
    with pytest.raises(ValueError):
        fifo([1, 2], 0)
    with pytest.raises(ValueError):
        lru([1, 2], 0)
    with pytest.raises(ValueError):
        optimal([1, 2], 0)


def test_main_prints_all_three(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n4\n1 2 3 4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "PF No.  1: 1 - - " in out
    assert "FIFO Page Faults: 4" in out
    assert "LRU Page Faults: 4" in out
    assert "Optimal Page Faults: 4" in out


def test_main_rejects_zero_frames(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n2\n1 2\n"))
    assert main([]) == 1