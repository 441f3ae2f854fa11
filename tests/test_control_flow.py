import pytest

from flisp.errors import FlispTypeError


def test_while_counts_up(run_source):
    source = "(setq i 0)\n(while (less i 5) (setq i (plus i 1)))\ni"
    assert run_source(source) == ["5"]


def test_break_first_ends_loop_immediately(run_source):
    source = "(setq i 0)\n(while (less i 5) (break) (setq i (plus i 1)))\ni"
    assert run_source(source) == ["0"]


def test_break_from_cond(run_source):
    source = """
    (setq i 0)
    (while true
        (cond (equal i 3) (break))
        (setq i (plus i 1)))
    i
    """
    assert run_source(source) == ["3"]


def test_return_inside_loop_leaves_the_function(run_source):
    source = """
    (func first_over (limit)
        (prog (j)
            (setq j 0)
            (while true
                (cond (greater j limit) (return j))
                (setq j (plus j 1)))))
    (first_over 3)
    """
    assert run_source(source) == ["4"]


def test_while_is_silent(run_source, echo):
    assert run_source("(setq i 0)\n(while (less i 2) (setq i (plus i 1)) i)") == []
    assert echo.getvalue() == ""


@pytest.mark.parametrize("source", ["(while 1 (break))", "(cond 1 2 3)"])
def test_condition_must_be_boolean(run_source, source):
    with pytest.raises(FlispTypeError):
        run_source(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond (less 1 2) 10 20)", ["10"]),
        ("(cond (less 2 1) 10 20)", ["20"]),
        ("(cond false 1)", []),
        ("(cond true plus minus)", ["plus"]),
        ("(cond false plus minus)", ["minus"]),
    ],
)
def test_cond(run_source, source, expected):
    assert run_source(source) == expected


def test_top_level_break_stops_the_program(run_source):
    assert run_source("(plus 1 1)\n(break)\n(plus 2 2)") == ["2"]


def test_top_level_return_stops_the_program(run_source):
    assert run_source("(return 5)\n6") == []


@pytest.mark.parametrize(
    "source",
    [
        "(setq i 0)\n(prog () (setq i 5))\ni",
        "(setq i 1)\n(prog (i) (setq i 5))\ni",
    ],
)
def test_prog_shares_the_enclosing_frame(run_source, source):
    assert run_source(source) == ["5"]


def test_while_body_prog_updates_the_counter(run_source):
    source = "(setq i 0)\n(while (less i 5) (prog () (setq i (plus i 1))))\ni"
    assert run_source(source) == ["5"]


def test_prog_value_is_its_last_statement(run_source):
    assert run_source("(prog (a) (setq a 2) (times a 21))") == ["42"]
