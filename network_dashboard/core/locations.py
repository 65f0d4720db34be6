from __future__ import annotations

from typing import Dict, Iterable

from ..data.models import DistributionCenter


class LocationDirectory:
    """Resolves distribution center ids to display names.

    Unknown ids resolve to themselves so a dangling reference still renders.
    Instances are callable and can be passed anywhere a resolver is expected.
    """

    def __init__(self, centers: Iterable[DistributionCenter] = ()) -> None:
        self._centers: Dict[str, DistributionCenter] = {dc.id: dc for dc in centers}

    def name_for(self, dc_id: str) -> str:
        dc = self._centers.get(dc_id)
        return dc.name if dc is not None else dc_id

    def __call__(self, dc_id: str) -> str:
        return self.name_for(dc_id)

    def __iter__(self):
        return iter(self._centers.values())

    def __len__(self) -> int:
        return len(self._centers)
