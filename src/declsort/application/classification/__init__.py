"""Declaration classification."""

from declsort.application.classification.classifier import ClassifiedModule, Classifier

__all__ = [
    "ClassifiedModule",
    "Classifier",
]
