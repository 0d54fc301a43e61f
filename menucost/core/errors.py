class MenuCostError(Exception):
    """Base error; ``message`` is shown to the user as-is."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(MenuCostError):
    status_code = 404


class ConflictError(MenuCostError):
    status_code = 409


class MenuTypeInUseError(ConflictError):
    pass


class NoSourceMenusError(MenuCostError):
    status_code = 404


class PermissionDeniedError(MenuCostError):
    status_code = 403
