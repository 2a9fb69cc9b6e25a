from soltxview.parser.parsers import computeBudget, serum, systemProgram, tokenProgram

__all__ = ["computeBudget", "serum", "systemProgram", "tokenProgram"]
