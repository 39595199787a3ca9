import io
import sys

import pytest

from dsakit.menu import linked_list_menu, main, stack_menu


def run_linked(text):
    out = io.StringIO()
    code = linked_list_menu(io.StringIO(text), out)
    return code, out.getvalue()


def run_stack(text):
    out = io.StringIO()
    code = stack_menu(io.StringIO(text), out)
    return code, out.getvalue()


def test_linked_list_insert_and_display():
    code, output = run_linked("1 5\n1 8\n3 2\n8\n9\n")
    assert code == 0
    assert "linked list : 8 -> 5 -> 2 -> NULL\n" in output
    assert output.count("inserted\n") == 3
    assert output.endswith("exiting\n")


def test_linked_list_insert_middle_and_delete():
    code, output = run_linked("1 3\n1 1\n2 1 2\n7 2\n4\n8\n9\n")
    assert code == 0
    assert "linked list : 3 -> NULL\n" in output
    assert output.count("deleted\n") == 2


def test_linked_list_bad_index_exits_with_failure():
    code, output = run_linked("1 5\n2 0 7\n8\n")
    assert code == 1
    assert output.endswith("get lost\n")
    assert "linked list" not in output


def test_linked_list_invalid_choice_and_eof():
    code, output = run_linked("42\nabc\n")
    assert code == 0
    assert output.count("enter correctly\n") == 2


def test_linked_list_delete_from_empty_keeps_running():
    code, output = run_linked("4\n8\n9\n")
    assert code == 0
    assert "linked list : NULL\n" in output


def test_stack_push_top_display_pop():
    code, output = run_stack("2 56\n2 78\n3\n4\n1\n5\n")
    assert code == 0
    assert "56 has been added\n" in output
    assert "the value of top is 78\n" in output
    assert "78\t56\t\n" in output
    assert "the top stack value is 78\n" in output
    assert output.endswith("Exiting\n")


def test_stack_overflow_and_underflow():
    pushes = "".join(f"2 {n}\n" for n in range(6))
    code, output = run_stack(pushes + "1\n" * 6 + "5\n")
    assert code == 0
    assert output.count("has been added\n") == 5
    assert output.count("STACK IS FULL\n") == 1
    assert output.count("the top stack value is") == 5
    assert output.count("THE STACK IS EMPTY\n") == 1


def test_stack_invalid_choice():
    code, output = run_stack("9\n5\n")
    assert code == 0
    assert "plz reframe your input\n" in output


def test_main_runs_stack_menu(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n5\n"))
    assert main(["stack"]) == 0
    assert "THE STACK IS EMPTY\n" in capsys.readouterr().out


def test_main_runs_linked_list_menu(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("9\n"))
    assert main(["linked-list"]) == 0
    assert capsys.readouterr().out.endswith("exiting\n")


def test_main_rejects_unknown_menu():
    with pytest.raises(SystemExit):
        main(["queue"])