"""Response-file (@file) expansion.

Expansion is iterative: tokens spliced in from one file are rescanned in
place, so nested response files are handled without recursion and share a
single iteration budget.
"""
