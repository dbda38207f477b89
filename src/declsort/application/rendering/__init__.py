"""Declaration rendering."""

from declsort.application.rendering.renderer import DeclarationRenderer, render_annotation

__all__ = [
    "DeclarationRenderer",
    "render_annotation",
]
