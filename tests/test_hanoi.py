import io

import pytest

from algokit.hanoi import hanoi_moves, main


def test_single_disk_moves_straight_to_target():
    assert list(hanoi_moves(1)) == [("A", "C")]


@pytest.mark.parametrize("disks", range(1, 9))
def test_move_count_is_minimal(disks):
    assert len(list(hanoi_moves(disks))) == 2**disks - 1


@pytest.mark.parametrize("disks", range(1, 8))
def test_moves_solve_the_puzzle_legally(disks):
    pegs = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    for source, target in hanoi_moves(disks):
        disk = pegs[source].pop()
        assert not pegs[target] or pegs[target][-1] > disk
        pegs[target].append(disk)
    assert pegs["C"] == list(range(disks, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_custom_peg_names_are_used():
    moves = list(hanoi_moves(3, "x", "y", "z"))
    used = {peg for move in moves for peg in move}
    assert used == {"x", "y", "z"}
    assert moves[-1][1] == "z"


@pytest.mark.parametrize("disks", [0, -3])
def test_non_positive_disks_rejected(disks):
    with pytest.raises(ValueError):
        hanoi_moves(disks)


def test_main_with_argument(capsys):
    assert main(["2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["A -> B", "A -> C", "B -> C", "No. of Moves:3"]


def test_main_reads_from_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enter No of Disk:")
    lines = out.splitlines()
    assert lines[-1] == f"No. of Moves:{len(lines) - 1}"


@pytest.mark.parametrize("raw", ["x", "0"])
def test_main_rejects_bad_input(raw, capsys):
    assert main([raw]) == 1
    assert "invalid number of disks" in capsys.readouterr().err