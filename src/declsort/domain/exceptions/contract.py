"""Host contract exceptions."""

from declsort.domain.exceptions.base import DeclSortError


class AnnotationContractError(DeclSortError):
    """Annotation data violates the shape the renderer relies on.

    Raised when a name-value annotation carries a non-string literal.
    This is a defect in the supplied syntax, not a user-facing condition,
    so it is never recovered from.

    Attributes:
        annotation_name: Name of the offending annotation
        literal_kind: Kind of literal that was found
    """

    def __init__(self, annotation_name: str, literal_kind: str) -> None:
        if not annotation_name:
            raise ValueError("annotation_name must not be empty")
        if not literal_kind:
            raise ValueError("literal_kind must not be empty")

        self.annotation_name = annotation_name
        self.literal_kind = literal_kind
        super().__init__(
            f"unexpected {literal_kind} literal for annotation '{annotation_name}', expected string"
        )
