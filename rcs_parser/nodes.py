"""Node definitions for parsed comma-v documents."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    field_serializer,
    field_validator,
    model_serializer,
    model_validator,
)


class Num(BaseModel):
    """An RCS revision number, ``1.2.3.4`` is ``Num(numbers=(1, 2, 3, 4))``."""

    model_config = ConfigDict(frozen=True)

    numbers: tuple[NonNegativeInt, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"numbers": tuple(int(part) for part in data.split(".")) if data else ()}
        if isinstance(data, (list, tuple)):
            return {"numbers": tuple(data)}
        return data

    @model_serializer
    def _serialize(self) -> str:
        return str(self)

    @classmethod
    def of(cls, *numbers: int) -> Num:
        return cls(numbers=numbers)

    def __str__(self) -> str:
        return ".".join(str(number) for number in self.numbers)

    def __lt__(self, other: Num) -> bool:
        if not isinstance(other, Num):
            return NotImplemented
        return self.numbers < other.numbers

    def __le__(self, other: Num) -> bool:
        if not isinstance(other, Num):
            return NotImplemented
        return self.numbers <= other.numbers

    def __gt__(self, other: Num) -> bool:
        if not isinstance(other, Num):
            return NotImplemented
        return self.numbers > other.numbers

    def __ge__(self, other: Num) -> bool:
        if not isinstance(other, Num):
            return NotImplemented
        return self.numbers >= other.numbers

    @property
    def is_branch(self) -> bool:
        return len(self.numbers) % 2 == 1

    @property
    def is_revision(self) -> bool:
        return not self.is_branch

    @property
    def is_valid_revision(self) -> bool:
        return bool(self.numbers) and self.is_revision and all(number > 0 for number in self.numbers)

    def branching_point(self) -> Num:
        """The revision a branch (or a revision on that branch) grows from.

        ``1.2.3`` and ``1.2.3.4`` both branch from ``1.2``.
        """
        drop = 1 if self.is_branch else 2
        return Num(numbers=self.numbers[: max(len(self.numbers) - drop, 0)])

    def branching_points(self) -> list[Num]:
        return [Num(numbers=self.numbers[:size]) for size in range(2, len(self.numbers), 2)]


class DiffAdd(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["add"] = "add"
    position: NonNegativeInt
    lines: list[str] = Field(default_factory=list)


class DiffDelete(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["delete"] = "delete"
    position: NonNegativeInt
    count: NonNegativeInt


DiffCommand = Annotated[DiffAdd | DiffDelete, Field(discriminator="kind")]


class HeadText(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["head"] = "head"
    text: str = ""

    def is_empty(self) -> bool:
        return not self.text


class DiffText(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["diff"] = "diff"
    commands: list[DiffCommand] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.commands


Text = Annotated[HeadText | DiffText, Field(discriminator="kind")]


class DeltaText(BaseModel):
    model_config = ConfigDict(frozen=True)

    num: Num
    log: str
    text: Text


class Delta(BaseModel):
    model_config = ConfigDict(frozen=True)

    num: Num
    date: Num
    author: str
    state: str | None = None
    branches: list[Num] = Field(default_factory=list)
    next: Num | None = None
    commitid: str | None = None
    log: str = ""
    text: Text = Field(default_factory=DiffText)


class RcsData(BaseModel):
    model_config = ConfigDict(frozen=True)

    head: Num
    branch: Num | None = None
    access: list[str] = Field(default_factory=list)
    symbols: list[tuple[str, Num]] = Field(default_factory=list)
    locks: list[tuple[str, Num]] = Field(default_factory=list)
    strict: bool = False
    integrity: str | None = None
    comment: str | None = None
    expand: str | None = None
    desc: str = ""
    deltas: dict[Num, Delta] = Field(default_factory=dict)

    @field_validator("deltas")
    @classmethod
    def _order_deltas(cls, deltas: dict[Num, Delta]) -> dict[Num, Delta]:
        return dict(sorted(deltas.items(), key=lambda item: item[0]))

    @field_serializer("deltas")
    def _serialize_deltas(self, deltas: dict[Num, Delta]) -> dict[str, Delta]:
        return {str(num): delta for num, delta in deltas.items()}
