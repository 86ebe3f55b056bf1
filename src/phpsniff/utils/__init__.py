"""
Utilities: console and logging plumbing, and the syntax tree printer.
"""
