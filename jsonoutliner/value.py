"""Values produced by the parser.

Parsed documents are made of plain Python objects: ``str``, ``int``,
``float``, ``bool``, ``list``, ``dict`` and ``None``. The one addition is
:class:`Reference`, a bare snake_case name that the outline format allows
wherever a value may stand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Union


@dataclass(frozen=True)
class Reference:
    """A bare identifier standing in place of a value."""

    name: str

    def __str__(self) -> str:
        return self.name


Value = Union[
    str,
    int,
    float,
    bool,
    None,
    Reference,
    List["Value"],
    Dict[str, "Value"],
]