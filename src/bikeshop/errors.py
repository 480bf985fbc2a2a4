"""Exceptions raised by bikeshop models."""


class BikeshopError(Exception):
    """Base class for bikeshop errors."""


class MissingCollaborator(BikeshopError):
    """Raised when an operation needs a collaborator that was never provided."""

    def __init__(self, owner: str, collaborator: str):
        self.owner = owner
        self.collaborator = collaborator
        super().__init__(f"{owner} has no {collaborator}")
