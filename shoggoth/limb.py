"""A limb: a private set of layers that can be synchronised with another limb."""

from __future__ import annotations

import threading
import time
from typing import Optional

from .layer import Layer
from .layer_list import LayerList


class LimbError(Exception):
    """Raised when a limb operation cannot be performed."""

    def __init__(self, code: str, message: str = "") -> None:
        super().__init__(message or code)
        self.code = code


def _now() -> int:
    """Current moment in microseconds."""
    return time.time_ns() // 1000


class Limb:
    """Holds layers for thread-protected work by one participant of the net."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.layers = LayerList(self)
        # Moment of the last reconfiguration.
        self.last_update: int = 0
        # Moment of the last insertion or deletion of a layer.
        self.last_change_structure: int = 0
        # Moment of the last change of layer values.
        self.last_change_values: int = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(layers={self.layers!r})"

    def create_layer(self, layer_id: str) -> Layer:
        """Return the layer with the id, creating it when it does not exist."""
        with self.lock:
            existing = self.layers.get_by_id(layer_id)
            if existing is not None:
                return existing
            layer = Layer(self, layer_id)
            self.layers.push(layer)
            self.last_change_structure = _now()
            return layer

    def delete_layer(self, layer_id: str) -> Limb:
        """Remove the layer with the id; an unknown id is ignored."""
        with self.lock:
            index = self.layers.index_by_id(layer_id)
            if index is not None:
                self.layers.remove(index)
                self.last_change_structure = _now()
        return self

    def copy_to(self, other: Limb, strict_sync: bool) -> Limb:
        """Copy values and errors to another limb.

        With strict_sync the other limb's structure is replaced by this one's
        when they differ; otherwise data is copied only between equal structures.
        """
        if other is self:
            raise LimbError("UnableLimbItselfCopyTo")
        with self.lock, other.lock:
            layers_equal = self.layers.compare(other.layers)
            if strict_sync and not layers_equal:
                other.copy_structure_from(self.layers)
                layers_equal = True
            if layers_equal:
                other.layers.copy_values_from(self.layers)
                other.layers.copy_errors_from(self.layers)
        return self

    def copy_structure_from(self, layers: LayerList) -> Limb:
        """Replace all layers with copies of the given layers' structure."""
        with self.lock:
            self.layers.clear()
            for source in layers:
                layer = self.copy_layer_from(source)
                layer.name = source.name
                self.layers.push(layer)
            self.last_change_structure = _now()
        return self

    def copy_layer_from(self, layer: Layer) -> Layer:
        """Create a layer for this limb with the settings and size of the given one."""
        result = Layer(self, layer.id)
        result.error_calc = layer.error_calc
        result.weight_calc = layer.weight_calc
        result.front_func = layer.front_func
        result.back_func = layer.back_func
        result.back_func_out = layer.back_func_out
        result.set_size(layer.size)
        return result

    def get_layer_by_id(self, layer_id: str) -> Optional[Layer]:
        """The layer with the id, or None."""
        return self.layers.get_by_id(layer_id)

    def on_change_values(self) -> Limb:
        """Record the moment of a change of values."""
        self.last_change_values = _now()
        return self