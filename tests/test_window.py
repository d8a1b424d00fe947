"""Tests for swatch grid layout, title bar dragging and platform services."""

import pytest

from palette_view import grid_columns, grid_position, is_dark
from platform_services import MacPlatformServices, PlatformServices, detect_platform_services
from title_bar import WindowDrag


class TestGridLayout:

    @pytest.mark.parametrize("count, columns", [(0, 1), (1, 1), (2, 2), (4, 2), (5, 3), (9, 3), (10, 4)])
    def test_near_square_columns(self, count, columns):
        assert grid_columns(count) == columns

    def test_positions_fill_rows(self):
        assert [grid_position(i, 5) for i in range(5)] == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1)]

    def test_is_dark(self):
        assert is_dark((0, 0, 0))
        assert not is_dark((255, 255, 255))


class TestWindowDrag:

    def test_window_follows_pointer(self):
        drag = WindowDrag()
        drag.press(10, 5)
        assert drag.drag(300, 200) == (290, 195)
        assert drag.drag(310, 190) == (300, 185)


class TestPlatformServices:

    def test_macos_supports_dock_icon(self):
        services = detect_platform_services("darwin")
        assert isinstance(services, MacPlatformServices)
        assert services.supports_dock_icon

    @pytest.mark.parametrize("platform", ["linux", "win32"])
    def test_other_platforms(self, platform):
        services = detect_platform_services(platform)
        assert type(services) is PlatformServices
        assert not services.supports_dock_icon
        assert services.set_dock_icon(None, None) is False
