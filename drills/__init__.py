"""Classic programming exercises: searching, sorting, arrays, matrices, linked lists, stacks, queues, trees, text and patterns."""

__version__ = "0.1.0"