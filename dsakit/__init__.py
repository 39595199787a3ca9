"""Classic data structures and algorithms in plain Python, with interactive menus."""

__version__ = "0.1.0"

__all__ = [
    "expressions",
    "linked_list",
    "menu",
    "queues",
    "recursion",
    "searching",
    "sorting",
    "stack",
    "trees",
]