"""
Lox expression language front end.

Scanner, parser, evaluator and tree printer for the expression subset of Lox.

Usage:
    from loxpy.core.expression_lang import evaluate, parse, scan

    expr = parse(scan("1 + 2 * 3"))
    result = evaluate(expr)
    # result == 7.0
"""

from loxpy.core.expression_lang.evaluator import evaluate
from loxpy.core.expression_lang.parser import Parser, parse
from loxpy.core.expression_lang.printer import print_ast
from loxpy.core.expression_lang.scanner import Scanner, scan

__all__ = ["Parser", "Scanner", "evaluate", "parse", "print_ast", "scan"]
