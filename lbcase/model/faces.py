"""
Per-face boundary condition tables.

A table holds one condition per domain face, indexed by canonical face order
(West, East, South, North[, Bottom, Top]). Faces are never stored: the face of
entry i is always Dimensionality.faces[i]. The same table logic serves the
momentum and the passive scalar fields; each subclass pins its own closed set
of condition types and the default condition used for newly added faces.
"""

import typing, dataclasses

from ..common import LBCaseException
from .lattice import Dimensionality, BoundaryFace

BC = typing.TypeVar("BC")


@dataclasses.dataclass
class FaceBoundaryEntry(typing.Generic[BC]):
    face:      BoundaryFace
    condition: BC


class FaceBoundaryTable(typing.Generic[BC]):
    CONDITION_TYPES: typing.Tuple[type, ...] = ()
    FIELD: str = ""

    def __init__(self, dim: Dimensionality = Dimensionality.D2,
                 conditions: typing.Optional[typing.Iterable[BC]] = None) -> None:
        self.conditions: typing.List[BC] = []
        for condition in (conditions or []):
            self.conditions.append(self._check(condition))

        self.resize(dim)

    @classmethod
    def default_condition(cls) -> BC:
        raise NotImplementedError

    def _check(self, condition: BC) -> BC:
        if not isinstance(condition, self.CONDITION_TYPES):
            raise LBCaseException(
                f"{type(condition).__name__} is not a {self.FIELD} boundary condition. "
                f"Expected one of: {', '.join(t.__name__ for t in self.CONDITION_TYPES)}."
            )

        return condition

    def resize(self, dim: Dimensionality) -> None:
        """
        Grows the table with default conditions for the faces dim introduces, or
        drops the faces it removes. Entries that remain keep their conditions.
        """
        n = len(dim.faces)

        del self.conditions[n:]
        while len(self.conditions) < n:
            self.conditions.append(self.default_condition())

    def _index(self, key: typing.Union[int, BoundaryFace]) -> int:
        if isinstance(key, BoundaryFace):
            index = list(BoundaryFace).index(key)
            if index >= len(self.conditions):
                raise LBCaseException(f"Face {key.value} is not part of a {len(self)}-face domain.")
            return index

        if not 0 <= key < len(self.conditions):
            raise LBCaseException(f"Face index {key} is out of range for a {len(self)}-face domain.")

        return key

    def __getitem__(self, key: typing.Union[int, BoundaryFace]) -> BC:
        return self.conditions[self._index(key)]

    def __setitem__(self, key: typing.Union[int, BoundaryFace], condition: BC) -> None:
        self.conditions[self._index(key)] = self._check(condition)

    def __len__(self) -> int:
        return len(self.conditions)

    def __iter__(self) -> typing.Iterator[FaceBoundaryEntry[BC]]:
        for face, condition in zip(BoundaryFace, self.conditions):
            yield FaceBoundaryEntry(face, condition)

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.conditions == other.conditions

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(f'{e.face.value}={e.condition!r}' for e in self)})"

    @property
    def faces(self) -> typing.List[BoundaryFace]:
        return [ entry.face for entry in self ]
