# Dotgrid
# Copyright 2025 - Ricardo Quesada
import logging
import typing

from PySide6.QtCore import QObject, QSettings, Signal

from state_properties import StateProperties

logger = logging.getLogger(__name__)


class Preferences(QObject):
    # Triggered when any of the values that define the grid changes.
    grid_properties_changed = Signal()
    # Triggered when any of the canvas colors changes.
    colors_changed = Signal()

    def __init__(self):
        super().__init__()
        self._settings = QSettings()

    def get_window_geometry(self) -> typing.Any:
        return self._settings.value("main_window/window_geometry", defaultValue=None)

    def set_window_geometry(self, geometry: typing.Any) -> None:
        self._settings.setValue("main_window/window_geometry", geometry)

    def get_default_window_geometry(self) -> typing.Any:
        return self._settings.value("main_window/default_window_geometry", defaultValue=None)

    def set_default_window_geometry(self, geometry: typing.Any) -> None:
        self._settings.setValue("main_window/default_window_geometry", geometry)

    #
    # Grid
    #
    def get_node_diameter(self) -> float:
        return float(self._settings.value("grid/node_diameter", defaultValue=40))

    def set_node_diameter(self, diameter: float) -> None:
        self._set_grid_value("grid/node_diameter", diameter, self.get_node_diameter(), 1)

    def get_gap_size(self) -> float:
        return float(self._settings.value("grid/gap_size", defaultValue=16))

    def set_gap_size(self, gap: float) -> None:
        self._set_grid_value("grid/gap_size", gap, self.get_gap_size(), 0)

    def get_grid_padding(self) -> float:
        return float(self._settings.value("grid/padding", defaultValue=32))

    def set_grid_padding(self, padding: float) -> None:
        self._set_grid_value("grid/padding", padding, self.get_grid_padding(), 0)

    def get_capture_slack(self) -> float:
        return float(self._settings.value("grid/capture_slack", defaultValue=20))

    def set_capture_slack(self, slack: float) -> None:
        self._set_grid_value("grid/capture_slack", slack, self.get_capture_slack(), 0)

    #
    # Decorations
    #
    def get_decoration_size(self) -> tuple[int, int]:
        w = int(self._settings.value("decorations/width_in_cols", defaultValue=25))
        h = int(self._settings.value("decorations/height_in_rows", defaultValue=5))
        return w, h

    def set_decoration_size(self, size: tuple[int, int]) -> None:
        current = self.get_decoration_size()
        if current[0] != size[0] or current[1] != size[1]:
            self._settings.setValue("decorations/width_in_cols", size[0])
            self._settings.setValue("decorations/height_in_rows", size[1])
            self.grid_properties_changed.emit()

    def get_decoration_catalog_filename(self) -> str | None:
        filename = self._settings.value("decorations/catalog_filename", defaultValue=None)
        if not filename:
            return None
        return str(filename)

    def set_decoration_catalog_filename(self, filename: str | None) -> None:
        current = self.get_decoration_catalog_filename()
        if current != filename:
            self._settings.setValue("decorations/catalog_filename", filename or "")
            self.grid_properties_changed.emit()

    #
    # Colors
    #
    def get_canvas_background_color_name(self) -> str:
        return str(self._settings.value("canvas/background_color", defaultValue="#fff4f4f2"))

    def set_canvas_background_color_name(self, color: str):
        self._set_color_value(
            "canvas/background_color", color, self.get_canvas_background_color_name()
        )

    def get_node_color_name(self) -> str:
        return str(self._settings.value("canvas/node_color", defaultValue="#ffd6d3d1"))

    def set_node_color_name(self, color: str):
        self._set_color_value("canvas/node_color", color, self.get_node_color_name())

    def get_shape_color_name(self) -> str:
        return str(self._settings.value("canvas/shape_color", defaultValue="#ff000000"))

    def set_shape_color_name(self, color: str):
        self._set_color_value("canvas/shape_color", color, self.get_shape_color_name())

    def get_preview_color_name(self) -> str:
        return str(self._settings.value("canvas/preview_color", defaultValue="#80000000"))

    def set_preview_color_name(self, color: str):
        self._set_color_value("canvas/preview_color", color, self.get_preview_color_name())

    def get_state_properties(self) -> StateProperties:
        """Returns the properties used to create a State."""
        width, height = self.get_decoration_size()
        return StateProperties(
            node_diameter=self.get_node_diameter(),
            gap_size=self.get_gap_size(),
            grid_padding=self.get_grid_padding(),
            capture_slack=self.get_capture_slack(),
            decoration_width_in_cols=width,
            decoration_height_in_rows=height,
            decoration_catalog_filename=self.get_decoration_catalog_filename(),
        )

    def _set_grid_value(self, key: str, value: float, current: float, minimum: float) -> None:
        if value < minimum:
            logger.error(f"Invalid value for {key}: {value}. Must be >= {minimum}")
            return
        if current != value:
            self._settings.setValue(key, value)
            self.grid_properties_changed.emit()

    def _set_color_value(self, key: str, color: str, current: str) -> None:
        if current != color:
            self._settings.setValue(key, color)
            self.colors_changed.emit()


_global_preferences = None


# Singleton
def get_global_preferences() -> Preferences:
    # Using a function to return the global instance so that we can delay
    # the creation of QSettings() after QApplication.setOrganizationName() is called
    global _global_preferences
    if _global_preferences is None:
        _global_preferences = Preferences()
    return _global_preferences


if __name__ == "__main__":
    preferences = get_global_preferences()
    print(f"Geometry: {preferences.get_window_geometry()}")
    print(f"State properties: {preferences.get_state_properties()}")
