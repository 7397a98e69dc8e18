"""
Focus and method cycling for the interactive interface

Both controllers are pure: they take the current state and return the next
one. The session owns the single live copy of each state.
"""

from dataclasses import dataclass

from .models import HTTP_METHODS


@dataclass(frozen=True)
class Region:
    """A logical input region of the interface"""

    name: str
    title: str
    editable: bool


# Tab order; history is read-only
DEFAULT_REGIONS = (
    Region("url", "Api URL", editable=True),
    Region("method", "Method", editable=False),
    Region("body", "Request Body", editable=True),
    Region("output", "Results", editable=False),
    Region("history", "History", editable=False),
)


@dataclass(frozen=True)
class FocusState:
    active_region_index: int
    cursor_visible: bool


@dataclass(frozen=True)
class MethodSelectionState:
    active_method_index: int


class FocusController:
    """Cycles the active region; the cursor shows only on free-text regions"""

    def __init__(self, regions: tuple[Region, ...] = DEFAULT_REGIONS):
        if not regions:
            raise ValueError("At least one region is required")
        self.regions = regions

    @property
    def region_count(self) -> int:
        return len(self.regions)

    def advance(self, current_index: int) -> int:
        return (current_index + 1) % self.region_count

    def cursor_visible(self, index: int) -> bool:
        return self.regions[index].editable

    def state_for(self, index: int) -> FocusState:
        index %= self.region_count
        return FocusState(active_region_index=index, cursor_visible=self.cursor_visible(index))

    def initial_state(self, region_name: str | None = None) -> FocusState:
        """
        Build the starting state, focused on region_name (first region if None).

        Raises:
            ValueError: If region_name is not a known region
        """
        if region_name is None:
            return self.state_for(0)
        return self.state_for(self.index_of(region_name))

    def next_state(self, state: FocusState) -> FocusState:
        return self.state_for(self.advance(state.active_region_index))

    def region(self, state: FocusState) -> Region:
        return self.regions[state.active_region_index]

    def index_of(self, region_name: str) -> int:
        for index, region in enumerate(self.regions):
            if region.name == region_name:
                return index
        raise ValueError(f"Unknown region: {region_name}")


class MethodSelector:
    """Cycles the HTTP verb through GET, POST, DELETE, PUT"""

    def __init__(self, methods: tuple[str, ...] = HTTP_METHODS):
        if not methods:
            raise ValueError("At least one method is required")
        self.methods = methods

    @property
    def method_count(self) -> int:
        return len(self.methods)

    def advance(self, current_index: int) -> int:
        return (current_index + 1) % self.method_count

    def initial_state(self, method: str | None = None) -> MethodSelectionState:
        if method is None:
            return MethodSelectionState(active_method_index=0)
        try:
            return MethodSelectionState(active_method_index=self.methods.index(method.upper()))
        except ValueError:
            raise ValueError(f"Unsupported method: {method}") from None

    def next_state(self, state: MethodSelectionState) -> MethodSelectionState:
        return MethodSelectionState(active_method_index=self.advance(state.active_method_index))

    def label(self, state: MethodSelectionState) -> str:
        return self.methods[state.active_method_index]
