"""Interactive menus driving a linked list and a bounded stack."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from dsakit.linked_list import LinkedList
from dsakit.stack import ArrayStack, StackOverflowError, StackUnderflowError

LINKED_LIST_MENU = (
    "press 1 to insert at beginning\npress 2 to insert at middle\npress 3 to insert at last\n"
    "press 4 to delete from beginning\npress 5 to delete from middle\npress 6 to delete from last\n"
    "press 7 to delete by value\n"
    "press 8 to display\n"
    "press 9 to exit\n"
    "Enter your choice : "
)

STACK_MENU = (
    "press 1 to pop\npress 2 to push\npress 3 to display top\npress 4 to display full stack\n"
    "press 5 to exit\n"
    "Enter your choice : "
)

STACK_CAPACITY = 5


class _EndOfInput(Exception):
    pass


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    token = next(tokens, None)
    if token is None:
        raise _EndOfInput
    return int(token)


def linked_list_menu(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the linked-list menu until choice 9 or end of input; return an exit code."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    items = LinkedList()
    tokens = _tokens(stdin)
    while True:
        stdout.write(LINKED_LIST_MENU)
        try:
            match _read_int(tokens):
                case 1:
                    stdout.write("\nenter the value you wanna insert: ")
                    items.push_front(_read_int(tokens))
                    stdout.write("inserted\n")
                case 2:
                    stdout.write("enter the index in which you wanna insert: ")
                    index = _read_int(tokens)
                    stdout.write("\nenter the value you wanna insert: ")
                    value = _read_int(tokens)
                    try:
                        items.insert_at(index, value)
                    except IndexError:
                        stdout.write("get lost\n")
                        return 1
                    stdout.write("inserted\n")
                case 3:
                    stdout.write("\nenter the value you wanna insert: ")
                    items.append(_read_int(tokens))
                    stdout.write("inserted\n")
                case 4:
                    items.pop_front()
                    stdout.write("deleted\n")
                case 5:
                    stdout.write("enter the index you wanna delete: ")
                    items.delete_at(_read_int(tokens))
                    stdout.write("deleted\n")
                case 6:
                    items.pop_back()
                    stdout.write("deleted\n")
                case 7:
                    stdout.write("enter the value you wanna delete: ")
                    items.remove(_read_int(tokens))
                    stdout.write("deleted\n")
                case 8:
                    stdout.write(f"linked list : {items}\n")
                case 9:
                    stdout.write("exiting\n")
                    return 0
                case _:
                    stdout.write("enter correctly\n")
        except _EndOfInput:
            return 0
        except ValueError:
            stdout.write("enter correctly\n")
        except IndexError as exc:
            stdout.write(f"{exc}\n")


def stack_menu(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the stack menu until choice 5 or end of input; return an exit code."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stack = ArrayStack(STACK_CAPACITY)
    tokens = _tokens(stdin)
    while True:
        stdout.write(STACK_MENU)
        try:
            match _read_int(tokens):
                case 1:
                    stdout.write(f"the top stack value is {stack.pop()}\n")
                case 2:
                    stdout.write("Enter the value you wanna push: ")
                    value = _read_int(tokens)
                    stack.push(value)
                    stdout.write(f"{value} has been added\n")
                case 3:
                    stdout.write(f"the value of top is {stack.top()}\n")
                case 4:
                    if stack.is_empty():
                        stdout.write("THE STACK IS EMPTY\n")
                    else:
                        stdout.write("".join(f"{value}\t" for value in stack) + "\n")
                case 5:
                    stdout.write("Exiting\n")
                    return 0
                case _:
                    stdout.write("plz reframe your input\n")
        except _EndOfInput:
            return 0
        except ValueError:
            stdout.write("plz reframe your input\n")
        except StackOverflowError:
            stdout.write("STACK IS FULL\n")
        except StackUnderflowError:
            stdout.write("THE STACK IS EMPTY\n")


def main(argv: list[str] | None = None) -> int:
    """Start the menu named on the command line."""
    parser = argparse.ArgumentParser(prog="dsakit", description="Interactive data structure menus.")
    parser.add_argument("menu", choices=["linked-list", "stack"])
    args = parser.parse_args(argv)
    if args.menu == "linked-list":
        return linked_list_menu()
    return stack_menu()


if __name__ == "__main__":
    raise SystemExit(main())