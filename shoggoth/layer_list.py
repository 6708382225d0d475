"""Ordered collection of layers addressed by index or id."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from .layer import Layer


class LayerList:
    """Layers of a limb, kept in insertion order."""

    def __init__(self, limb: Any) -> None:
        self.limb = limb
        self._layers: list[Layer] = []

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __getitem__(self, index: int) -> Layer:
        return self._layers[index]

    def __setitem__(self, index: int, layer: Layer) -> None:
        self._layers[index] = layer

    def __contains__(self, layer: object) -> bool:
        return any(item is layer for item in self._layers)

    def __repr__(self) -> str:
        return f"LayerList({[layer.id for layer in self._layers]!r})"

    def push(self, layer: Layer) -> LayerList:
        """Append one layer."""
        self._layers.append(layer)
        return self

    def extend(self, other: Iterable[Layer]) -> LayerList:
        """Append every layer of another list or iterable."""
        self._layers.extend(other)
        return self

    def remove(self, index: int) -> Layer:
        """Remove the layer at the index and return it."""
        return self._layers.pop(index)

    def index_by_id(self, layer_id: str) -> Optional[int]:
        """Index of the first layer with the id, or None when there is none."""
        return next(
            (i for i, layer in enumerate(self._layers) if layer.id == layer_id),
            None,
        )

    def get_by_id(self, layer_id: str) -> Optional[Layer]:
        """The first layer with the id, or None when there is none."""
        index = self.index_by_id(layer_id)
        return None if index is None else self._layers[index]

    def clear(self) -> LayerList:
        """Drop every layer."""
        self._layers.clear()
        return self

    def compare(self, other: LayerList) -> bool:
        """True when both lists hold structurally equal layers with the same ids."""
        if len(self) != len(other):
            return False
        return all(layer.compare(other.get_by_id(layer.id)) for layer in self._layers)

    def copy_values_from(self, source: LayerList) -> LayerList:
        """Copy values from layers of the source that have a layer with the same id here."""
        for from_layer in source:
            to_layer = self.get_by_id(from_layer.id)
            if to_layer is not None:
                to_layer.copy_values_from(from_layer)
        return self

    def copy_errors_from(self, source: LayerList) -> LayerList:
        """Copy errors from layers of the source that have a layer with the same id here."""
        for from_layer in source:
            to_layer = self.get_by_id(from_layer.id)
            if to_layer is not None:
                to_layer.copy_errors_from(from_layer)
        return self