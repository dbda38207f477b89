"""declsort infrastructure layer.

Host adapters (Rust parser, source map) and configuration loading.
"""
