"""Classic data structures and algorithms: arrays, recursion, heaps, graphs,
linked lists, stacks, queues and binary search trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "graphs",
    "heaps",
    "linked_list",
    "queues",
    "recursion",
    "stacks",
    "trees",
]