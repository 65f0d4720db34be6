from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional

from ..data.models import Movement, MovementFilters, PriorityFilter, SortKey, StatusFilter

NameResolver = Callable[[str], str]

LOCATION_KEYS = ("origin_dc", "destination_dc")


def _identity(dc_id: str) -> str:
    return dc_id


def matches(movement: Movement, filters: MovementFilters, resolve_name: NameResolver = _identity) -> bool:
    """Return True when the movement passes the search, status and priority filters."""
    if filters.search:
        needle = filters.search.lower()
        haystack = (
            movement.sku,
            movement.description,
            resolve_name(movement.origin_dc),
            resolve_name(movement.destination_dc),
        )
        if not any(needle in value.lower() for value in haystack):
            return False
    if filters.status != "all" and movement.status != filters.status:
        return False
    if filters.priority != "all" and movement.priority != filters.priority:
        return False
    return True


def sort_value(movement: Movement, key: SortKey, resolve_name: NameResolver = _identity) -> Any:
    value = getattr(movement, key)
    if key in LOCATION_KEYS:
        value = resolve_name(value)
    if value is None:
        return ""
    if isinstance(value, str):
        return value.lower()
    return value


def project_movements(
    movements: Iterable[Movement],
    filters: MovementFilters,
    resolve_name: NameResolver = _identity,
) -> List[Movement]:
    """Filter and sort movements for display. The input is never modified.

    `sorted` is stable in both directions, so movements with equal keys keep
    their collection order.
    """
    selected = [m for m in movements if matches(m, filters, resolve_name)]
    return sorted(
        selected,
        key=lambda m: sort_value(m, filters.sort_by, resolve_name),
        reverse=filters.sort_direction == "desc",
    )


class MovementView:
    """Restartable projection of a movement source.

    Every iteration re-reads the source and the projector's current filters,
    so the view always reflects the latest state.
    """

    def __init__(self, source: Callable[[], Iterable[Movement]], projector: "ViewProjector") -> None:
        self._source = source
        self._projector = projector

    def items(self) -> List[Movement]:
        return self._projector.project(self._source())

    def __iter__(self) -> Iterator[Movement]:
        return iter(self.items())

    def __len__(self) -> int:
        return len(self.items())

    def __bool__(self) -> bool:
        return len(self) > 0


class ViewProjector:
    """Holds the table's filter and sort state and applies it to movements."""

    def __init__(self, resolve_name: NameResolver = _identity, filters: Optional[MovementFilters] = None) -> None:
        self.resolve_name = resolve_name
        self.filters = filters or MovementFilters()

    @property
    def has_active_filters(self) -> bool:
        return bool(self.filters.search) or self.filters.status != "all" or self.filters.priority != "all"

    def _update(self, **changes) -> None:
        self.filters = MovementFilters(**{**self.filters.model_dump(), **changes})

    def set_search(self, text: str) -> None:
        self._update(search=text or "")

    def set_status_filter(self, status: StatusFilter) -> None:
        self._update(status=status)

    def set_priority_filter(self, priority: PriorityFilter) -> None:
        self._update(priority=priority)

    def toggle_sort(self, key: SortKey) -> None:
        """Flip direction on the active key; a new key starts ascending."""
        if key == self.filters.sort_by:
            direction = "asc" if self.filters.sort_direction == "desc" else "desc"
        else:
            direction = "asc"
        self._update(sort_by=key, sort_direction=direction)

    def clear_filters(self) -> None:
        """Reset search, status and priority; the sort is kept."""
        self._update(search="", status="all", priority="all")

    def project(self, movements: Iterable[Movement]) -> List[Movement]:
        return project_movements(movements, self.filters, self.resolve_name)

    def view(self, store) -> MovementView:
        return MovementView(lambda: store.movements, self)
