"""Evaluator — лексический разбор, ОПЗ и вычисление выражения."""

from .evaluator import evaluate, evaluate_to_string
from .postfix import evaluate_postfix, to_postfix
from .tokenizer import tokenize

__all__ = [
    "evaluate",
    "evaluate_to_string",
    "evaluate_postfix",
    "to_postfix",
    "tokenize",
]
