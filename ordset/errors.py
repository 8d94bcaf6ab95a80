class EmptyCollection(ValueError):
    """Raised when an element is requested from an empty set."""

    def __init__(self, operation: str):
        super().__init__(operation)
        self.operation = operation

    def __str__(self) -> str:
        return f"{self.operation}() called on an empty OrderedSet"
