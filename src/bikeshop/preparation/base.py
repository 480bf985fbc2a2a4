"""The preparer capability and the record of work it produces."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from bikeshop.models.trip import Trip


@dataclass(frozen=True)
class PreparationTask:
    """One unit of work done while preparing a trip."""

    role: str
    action: str
    subject: str
    detail: str = ""


class Preparer(Protocol):
    """Anything that can help get a trip ready."""

    def prepare_trip(self, trip: "Trip") -> list[PreparationTask]:
        ...
