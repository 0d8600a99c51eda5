"""Value object pairing a registered value with its weight."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WeightedValue:
    """A registered value together with its integer weight."""

    value: Any
    weight: int

    def as_dict(self) -> dict[str, Any]:
        return {"value": self.value, "weight": self.weight}
