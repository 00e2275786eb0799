"""Generation-tagged object identifiers."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class ObjectId:
    """Stable object handle.

    Indices are reused after an object is despawned; the generation is bumped
    on every reuse so a handle to the old object never resolves to the new one.
    """
    index: int
    generation: int = 0

    def __str__(self) -> str:
        return f"{self.index}v{self.generation}"
