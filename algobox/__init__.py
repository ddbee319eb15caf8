"""Classic algorithms on strings, integers, lists, linked lists and binary trees."""

__version__ = "0.1.0"

__all__ = ["arrays", "integers", "linkedlist", "sorting", "text", "tree"]