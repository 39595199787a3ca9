# dsakit

Plain Python implementations of classic data structures and algorithms. They are
small enough to read in one sitting and are meant for learning and experimenting.
The package has no dependencies outside the standard library.

## Contents

- `dsakit.sorting`: `bubble_sort(values, compare=ascending)` with a pluggable
  comparison (`ascending`, `descending`), `insertion_sort`, `selection_sort` and
  `reverse_array`. Each takes any iterable and returns a new list; the input is
  left untouched.
- `dsakit.searching`: `linear_search(values, key)` returns the index of the first
  equal item; `binary_search(values, key)` searches an ascending sequence. Both
  return `None` when the key is absent.
- `dsakit.recursion`: `fibonacci(n)`, `sum_first_n(n, total=0)` and small
  sequence builders: `linear(start, stop)`, `linear_backtracking(i, n)`,
  `count_to_five(n)` and `repeat_line(text, start=0)`.
- `dsakit.trees`: the `TreeNode` dataclass (`value`, `left`, `right`) and the
  generators `inorder(root)` and `preorder(root)`.
- `dsakit.expressions`: `parentheses_balanced` (only `(` and `)`),
  `brackets_balanced` (`()`, `[]` and `{}`), `brackets_match`, `precedence`,
  `is_operator` and `infix_to_postfix`. The working stack holds at most 100
  openers or operators (`STACK_CAPACITY`); going past it raises `OverflowError`.
  `infix_to_postfix` accepts ASCII letters and digits, `+ - * / ^` and
  parentheses, treats every operator as left-associative, and raises
  `ValueError` for any other character.
- `dsakit.linked_list`:
  - `LinkedList`: `push_front`, `append`, `insert_at(index, value)` (index 1 to
    `len`), `pop_front`, `pop_back`, `delete_at(index)` (index 1 to `len - 1`),
    `remove(value)` (returns whether a node was removed) and in-place `reverse`.
    Invalid positions and taking from an empty list raise `IndexError`.
  - `CircularLinkedList`: `insert_first` and iteration once around the ring.
  - `DoublyLinkedList`: `append`, iteration and `reversed()`.
- `dsakit.stack`: `ArrayStack(capacity=5)` with `push`, `pop`, `top`,
  `peek(position)` (the top is position 1), `is_empty` and `is_full`; and an
  unbounded `LinkedStack` with `push`, `pop` and `is_empty`. Both iterate from
  the top down.
- `dsakit.queues`: `LinearQueue(size=4)` and `CircularQueue(size=4)` with
  `enqueue`, `dequeue`, `is_empty`, `is_full` and `len()`. A circular queue
  holds up to `size - 1` values at a time; a linear queue never reuses its
  slots, so it accepts at most `size - 1` values over its whole life.
- `dsakit.menu`: the interactive menus behind the `dsakit` command.

## Installation

```
pip install .
```

## Examples

```python
from dsakit.sorting import bubble_sort, descending
from dsakit.searching import binary_search
from dsakit.expressions import infix_to_postfix, brackets_balanced
from dsakit.stack import ArrayStack
from dsakit.trees import TreeNode, inorder

print(bubble_sort([5, 2, 7, 1, 9], descending))  # [9, 7, 5, 2, 1]

print(binary_search([1, 2, 3, 4], 3))           # 2
print(binary_search([1, 2, 3, 4], 8))           # None
print(infix_to_postfix("a+b*c"))                # abc*+
print(brackets_balanced("([8]{(9-8))"))         # False

stack = ArrayStack(5)
stack.push(56)
stack.push(78)
print(stack.pop())                              # 78

root = TreeNode(1, TreeNode(2), TreeNode(3))
print(list(inorder(root)))                      # [2, 1, 3]
```

Pushing onto a full `ArrayStack` raises `StackOverflowError` (a subclass of
`OverflowError`) and popping an empty stack raises `StackUnderflowError` (a
subclass of `IndexError`). The queues raise `QueueFullError` and
`QueueEmptyError` in the same situations.

## Interactive menus

The `dsakit` command starts a text menu that builds a linked list or a stack one
step at a time. Name the menu on the command line:

```
dsakit linked-list
dsakit stack
```

Input is read as whitespace-separated integers from standard input, so a menu
can also be driven by a pipe. The linked-list menu offers inserting at the
front, at a position or at the end, deleting from the front, a position or the
end, deleting by value, displaying the list and exiting (choice 9). Asking to
insert at an invalid position prints `get lost` and ends with exit status 1.
The stack menu works on an `ArrayStack` of capacity 5 and offers pop, push,
showing the top, showing the whole stack and exiting (choice 5). Either menu
also ends, with status 0, when the input runs out.

The menus keep everything in memory; nothing is saved between runs.

## Running the tests

```
pip install ".[test]"
pytest
```