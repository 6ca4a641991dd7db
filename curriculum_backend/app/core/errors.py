class CurriculumIntegrityError(ValueError):
    """Raised when a curriculum dataset breaks the graph's preconditions.

    ``problems`` holds one human-readable line per violation so callers can
    report every defect of a dataset at once instead of the first one only.
    """

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Invalid curriculum: " + "; ".join(problems))
