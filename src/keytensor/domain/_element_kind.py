"""
Element kinds supported by KeyTensor.

This module defines `ElementKind`, the closed set of value types a tensor may
hold. The domain layer only names the kinds; the mapping to concrete storage
(NumPy dtypes) lives in the infrastructure layer.
"""

from enum import Enum


class ElementKind(Enum):
    """
    Enumeration of tensor element kinds.

    Attributes
    ----------
    INT8, INT16, INT32, INT64 : ElementKind
        Signed integers of the given width.
    FLOAT32, FLOAT64 : ElementKind
        IEEE-754 floating point numbers.
    BOOL : ElementKind
        Booleans.
    CHAR : ElementKind
        Single unicode characters.
    OBJECT : ElementKind
        Arbitrary Python objects.
    """

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOL = "bool"
    CHAR = "char"
    OBJECT = "object"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, kind: "ElementKind | str") -> "ElementKind":
        """
        Normalize a kind given as an `ElementKind` or its string name.

        Parameters
        ----------
        kind : ElementKind or str
            Either an enum member or a name such as "int32" or "FLOAT64".

        Returns
        -------
        ElementKind
            The matching enum member.

        Raises
        ------
        ValueError
            If `kind` does not name a supported element kind.
        """
        if isinstance(kind, cls):
            return kind
        if isinstance(kind, str):
            try:
                return cls(kind.lower())
            except ValueError:
                pass
        raise ValueError(
            f"Unknown element kind {kind!r}. Expected one of "
            f"{[k.value for k in cls]}"
        )

    @property
    def is_integer(self) -> bool:
        return self in (
            ElementKind.INT8,
            ElementKind.INT16,
            ElementKind.INT32,
            ElementKind.INT64,
        )

    @property
    def is_float(self) -> bool:
        return self in (ElementKind.FLOAT32, ElementKind.FLOAT64)
