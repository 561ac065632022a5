"""BSD utility functions and data structures: number parsing, format
checking, block sizes, error reporting, streams, line parsing, random
numbers, bit strings, linked lists and ordered trees."""

__version__ = "0.1.0"

__all__ = [
    "arc4random",
    "bitstring",
    "dlist",
    "err",
    "fmtcheck",
    "fparseln",
    "getbsize",
    "rbtree",
    "slist",
    "splay",
    "stailq",
    "streams",
    "tailq",
    "units",
]