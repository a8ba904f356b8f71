"""String algorithms (suffix arrays, suffix automata, palindromic trees, KMP,
tries) and number-theory counting helpers."""

__version__ = "0.1.0"