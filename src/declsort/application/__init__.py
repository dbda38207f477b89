"""declsort application layer.

Ordering pipeline, checker facade, fixer and reporters.
"""
