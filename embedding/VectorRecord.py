# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Description: VectorRecord
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence


def flatten_embedding(output: Any) -> List[float]:
    """
    Some models return [[...]] for a single input; unwrap one level.
    """
    if hasattr(output, "tolist"):
        output = output.tolist()
    values = list(output)
    if values and isinstance(values[0], (list, tuple)):
        values = list(values[0])
    return [float(x) for x in values]


@dataclass
class VectorRecord:
    """Vector store entry: id + embedding + filterable metadata."""
    id: str
    values: List[float]
    metadata: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("VectorRecord id must not be empty")
        if not self.values:
            raise ValueError(f"VectorRecord '{self.id}' has an empty vector")

    @property
    def dimension(self) -> int:
        return len(self.values)

    @classmethod
    def from_embedding(cls, id: str, embedding: Sequence[float], metadata: Dict[str, str]) -> "VectorRecord":
        return cls(id=id, values=flatten_embedding(embedding), metadata=metadata)
