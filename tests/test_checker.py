import io

import pytest

from pushswap.checker import main, read_instructions, run_checker
from pushswap.solver import solve
from pushswap.stacks import Stacks


def _recording(names, consumed):
    """Yield each name, noting it in ``consumed`` as it is taken."""
    for name in names:
        consumed.append(name)
        yield name


def test_read_instructions_strips_newlines():
    stream = io.StringIO("sa\npb\nrra\n")
    assert list(read_instructions(stream)) == ["sa", "pb", "rra"]


def test_read_instructions_keeps_last_line_without_newline():
    stream = io.StringIO("pa\nsa")
    assert list(read_instructions(stream)) == ["pa", "sa"]


def test_read_instructions_keeps_empty_line_in_middle():
    stream = io.StringIO("sa\n\nra\n")
    assert list(read_instructions(stream)) == ["sa", "", "ra"]


def test_read_instructions_empty_stream():
    assert list(read_instructions(io.StringIO(""))) == []


def test_run_checker_already_sorted():
    out = io.StringIO()
    assert run_checker(Stacks([1, 2, 3]), [], False, out) is True
    assert out.getvalue() == "OK\n"


def test_run_checker_swap_sorts():
    out = io.StringIO()
    assert run_checker(Stacks([2, 1]), ["sa"], False, out) is True
    assert out.getvalue() == "OK\n"


def test_run_checker_unsorted_is_ko():
    out = io.StringIO()
    assert run_checker(Stacks([2, 1]), [], False, out) is False
    assert out.getvalue() == "KO\n"


def test_run_checker_nonempty_b_is_ko():
    out = io.StringIO()
    assert run_checker(Stacks([1, 2, 3]), ["pb"], False, out) is False
    assert out.getvalue() == "KO\n"


def test_run_checker_unknown_instruction_raises():
    out = io.StringIO()
    with pytest.raises(ValueError):
        run_checker(Stacks([2, 1]), ["sa", "xx"], False, out)
    assert out.getvalue() == ""


def test_run_checker_stops_reading_at_unknown_instruction():
    consumed = []
    instructions = _recording(["sa", "bad", "ra"], consumed)
    with pytest.raises(ValueError):
        run_checker(Stacks([2, 1]), instructions, False, io.StringIO())
    assert consumed == ["sa", "bad"]


def test_run_checker_visual_draws_after_each_operation():
    out = io.StringIO()
    assert run_checker(Stacks([3, 1, 2]), ["pb", "pa"], True, out) is False
    after_pb = Stacks([1, 2], [3]).render()
    after_pa = Stacks([3, 1, 2]).render()
    assert out.getvalue() == after_pb + after_pa + "KO\n"


@pytest.mark.parametrize(
    "values",
    [[3, 2, 1], [5, 1, 4, 2, 3], [10, -4, 7, 0, 22, 3, -9, 15, 1, 8]],
)
def test_solver_output_passes_checker(values):
    operations = solve(Stacks(values))
    out = io.StringIO()
    assert run_checker(Stacks(values), operations, False, out) is True
    assert out.getvalue() == "OK\n"


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_ok(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    assert main(["2 1"]) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_ko(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ra\n"))
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == "KO\n"


def test_main_duplicate_argument(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main(["1", "1"])
    assert capsys.readouterr().out == "Error\n"


def test_main_non_numeric_argument(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    main(["1", "two"])
    assert capsys.readouterr().out == "Error\n"


def test_main_unknown_instruction(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\nswap\n"))
    main(["2", "1"])
    assert capsys.readouterr().out == "Error\n"


def test_main_empty_line_is_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    main(["1", "2"])
    assert capsys.readouterr().out == "Error\n"


def test_main_visual_flag(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("sa\n"))
    main(["-v", "2", "1"])
    assert capsys.readouterr().out == Stacks([1, 2]).render() + "OK\n"