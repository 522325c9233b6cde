# taskboard/utils/errors.py


class ValidationError(Exception):
    """Mutation input rejected before it reaches the datastore"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MappingError(Exception):
    """A row could not be shaped for the API (e.g. None was passed in)"""
