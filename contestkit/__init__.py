"""Data structures, geometry, graph routines, token I/O and a local test runner for competitive programming."""

__version__ = "0.1.0"

__all__ = [
    "compress",
    "dsu",
    "dsu_r",
    "geo",
    "graph",
    "input",
    "output",
    "seg_tree",
    "tester",
    "xor_set",
]