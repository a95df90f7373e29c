# src/imgfit/protocols.py
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SizedImage(Protocol):
    """Protocol for image-like objects that expose their natural size.

    ``PIL.Image.Image`` satisfies this protocol, as does any object with
    numeric ``width`` and ``height`` attributes. Nothing is decoded; only
    the two attributes are read.
    """

    @property
    def width(self) -> float:
        """Natural width of the image."""
        ...

    @property
    def height(self) -> float:
        """Natural height of the image."""
        ...
