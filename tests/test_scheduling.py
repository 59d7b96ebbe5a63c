import pytest

from algokit.scheduling import (
    Process,
    Schedule,
    ScheduledProcess,
    format_schedule,
    main,
    shortest_job_first,
)

DEMO = [Process(1, 0, 6), Process(2, 1, 8), Process(3, 2, 7), Process(4, 3, 3)]


def _check_invariants(schedule, processes):
    entries = schedule.entries
    assert sorted(e.process.id for e in entries) == sorted(p.id for p in processes)
    for entry in entries:
        assert entry.start_time >= entry.process.arrival_time
        assert entry.completion_time - entry.start_time == entry.process.burst_time
        assert entry.waiting_time >= 0
    runs = sorted((e.start_time, e.completion_time) for e in entries)
    for (_, end), (start, _) in zip(runs, runs[1:]):
        assert start >= end


def test_entries_are_in_arrival_order():
    schedule = shortest_job_first(reversed(DEMO))
    arrivals = [e.process.arrival_time for e in schedule.entries]
    assert arrivals == sorted(arrivals)


def test_demo_invariants():
    _check_invariants(shortest_job_first(DEMO), DEMO)


def test_shortest_ready_job_runs_next():
    schedule = shortest_job_first(DEMO)
    first = min(schedule.entries, key=lambda e: e.start_time)
    assert first.process.id == 1
    after_first = [e for e in schedule.entries if e is not first]
    next_entry = min(after_first, key=lambda e: e.start_time)
    assert next_entry.process.burst_time == min(e.process.burst_time for e in after_first)


def test_demo_average_waiting_time():
    assert shortest_job_first(DEMO).average_waiting_time == pytest.approx(6.25)


def test_ties_go_to_earlier_arrival():
    processes = [Process(1, 0, 2), Process(2, 1, 4), Process(3, 0, 4)]
    schedule = shortest_job_first(processes)
    by_id = {e.process.id: e for e in schedule.entries}
    assert by_id[3].start_time < by_id[2].start_time


def test_idle_gap_is_skipped():
    processes = [Process(1, 5, 2), Process(2, 20, 1)]
    schedule = shortest_job_first(processes)
    _check_invariants(schedule, processes)
    assert all(e.waiting_time == 0 for e in schedule.entries)
    assert [e.start_time for e in schedule.entries] == [5, 20]


def test_single_process():
    schedule = shortest_job_first([Process(9, 0, 4)])
    entry = schedule.entries[0]
    assert entry.completion_time == entry.process.burst_time
    assert schedule.average_waiting_time == 0


def test_empty_input_raises():
    with pytest.raises(ValueError):
        shortest_job_first([])


def test_negative_burst_raises():
    with pytest.raises(ValueError):
        shortest_job_first([Process(1, 0, -1)])


def test_turnaround_is_completion_minus_arrival():
    entry = ScheduledProcess(Process(1, 3, 2), 4, 6)
    assert entry.turnaround_time == entry.completion_time - entry.process.arrival_time
    assert entry.waiting_time == entry.start_time - entry.process.arrival_time


def test_format_schedule_layout():
    schedule = Schedule((ScheduledProcess(Process(7, 0, 5), 0, 5),))
    text = format_schedule(schedule)
    lines = text.splitlines()
    assert lines[0] == "Process\tArrival Time\tBurst Time\tCompletion Time\tWaiting Time"
    assert lines[1] == "P7\t0\t\t5\t\t5\t\t5"
    assert lines[-1] == "Average Waiting Time: 0"


def test_main_prints_table(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0].startswith("Process\tArrival Time")
    assert len(lines) == len(DEMO) + 2
    assert lines[-1] == "Average Waiting Time: 6.25"