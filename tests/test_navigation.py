"""
Tests for focus and method cycling
"""

import pytest

from src.models import HTTP_METHODS
from src.navigation import (
    DEFAULT_REGIONS,
    FocusController,
    FocusState,
    MethodSelectionState,
    MethodSelector,
    Region,
)


class TestFocusController:
    """Test region cycling and cursor visibility"""

    def test_advance_wraps_around(self):
        controller = FocusController()
        last = controller.region_count - 1

        assert controller.advance(0) == 1
        assert controller.advance(last) == 0

    def test_full_cycle_returns_to_start(self):
        """Advancing region_count times should return to the starting index"""
        controller = FocusController()
        for start in range(controller.region_count):
            index = start
            for _ in range(controller.region_count):
                index = controller.advance(index)
            assert index == start

    def test_cursor_only_on_text_regions(self):
        """Cursor should show on URL and body, not on selection-only regions"""
        controller = FocusController()
        visible = {
            region.name: controller.cursor_visible(i) for i, region in enumerate(controller.regions)
        }

        assert visible == {
            "url": True,
            "method": False,
            "body": True,
            "output": False,
            "history": False,
        }

    def test_next_state_updates_cursor(self):
        controller = FocusController()
        state = controller.initial_state("url")

        state = controller.next_state(state)

        assert state == FocusState(active_region_index=1, cursor_visible=False)
        assert controller.region(state).name == "method"

    def test_initial_state_defaults_to_first_region(self):
        controller = FocusController()

        assert controller.region(controller.initial_state()) == DEFAULT_REGIONS[0]

    def test_initial_state_unknown_region(self):
        with pytest.raises(ValueError, match="nowhere"):
            FocusController().initial_state("nowhere")

    def test_custom_regions(self):
        regions = (Region("a", "A", editable=True), Region("b", "B", editable=False))
        controller = FocusController(regions)

        assert controller.region_count == 2
        assert controller.advance(1) == 0

    def test_requires_regions(self):
        with pytest.raises(ValueError):
            FocusController(())


class TestMethodSelector:
    """Test HTTP method cycling"""

    def test_order(self):
        """Should walk GET, POST, DELETE, PUT and wrap"""
        selector = MethodSelector()
        state = selector.initial_state()
        seen = []
        for _ in range(5):
            seen.append(selector.label(state))
            state = selector.next_state(state)

        assert seen == ["GET", "POST", "DELETE", "PUT", "GET"]

    def test_full_cycle_returns_to_start(self):
        """Advancing method_count times should return to the starting index"""
        selector = MethodSelector()
        for start in range(selector.method_count):
            index = start
            for _ in range(selector.method_count):
                index = selector.advance(index)
            assert index == start

    def test_method_count(self):
        assert MethodSelector().method_count == len(HTTP_METHODS) == 4

    def test_initial_state_by_name(self):
        selector = MethodSelector()

        assert selector.initial_state("put") == MethodSelectionState(active_method_index=3)

    def test_initial_state_unknown_method(self):
        with pytest.raises(ValueError, match="PATCH"):
            MethodSelector().initial_state("PATCH")
