"""Item domain exceptions."""

from idspace.services.exceptions import ConflictError, NotFoundError, ValidationError


class EmptyIdList(ValidationError):
    """No ids were passed."""

    message = "No ids provided"


class InvalidIds(ValidationError):
    """Some ids are not positive integers."""

    message = "All ids must be positive integers"


class IdsAlreadyExist(ConflictError):
    """Some ids to add already exist."""

    message = "Some ids already exist"

    def __init__(self, duplicates: list[int]):
        super().__init__(duplicates=duplicates)
        self.duplicates = duplicates


class IdsNotFound(NotFoundError):
    """Some ids do not exist in the id space."""

    message = "Some ids do not exist"

    def __init__(self, nonexistent: list[object]):
        super().__init__(nonexistent=nonexistent)
        self.nonexistent = nonexistent


class IdsNotSelected(NotFoundError):
    """Some ids to unselect are not selected."""

    message = "Some ids are not in the selected list"

    def __init__(self, not_selected: list[object]):
        super().__init__(notSelected=not_selected)
        self.not_selected = not_selected


class DuplicateReorderIds(ValidationError):
    """The reorder list contains the same id twice."""

    message = "The list contains duplicate ids"


class ReorderIdsNotSelected(ValidationError):
    """The reorder list references ids that are not selected."""

    message = "The list must contain only selected ids"


class ReorderWindowOutOfRange(ValidationError):
    """The reorder window runs past the end of the filtered selection."""

    message = "Invalid reorder window parameters"


class ReorderWindowMismatch(ValidationError):
    """The reorder window no longer matches the current selection."""

    message = "The reorder window does not match the current data"
