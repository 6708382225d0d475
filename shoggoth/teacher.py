"""Teacher limb and layers: fill layers with samples for training."""

from __future__ import annotations

import contextlib
import logging
import random
from typing import Any, Iterable, Mapping, Optional, Union
from uuid import UUID

from .layer import Layer
from .limb import Limb

logger = logging.getLogger(__name__)

Bits = Union[bytes, bytearray, memoryview, UUID]


class LayerTeacher(Layer):
    """Layer with operations a teacher uses to load samples into neurons."""

    def _locked(self) -> contextlib.AbstractContextManager:
        lock = getattr(self.limb, "lock", None)
        return lock if lock is not None else contextlib.nullcontext()

    def noise_value(self, seed: int, min_value: float, max_value: float) -> LayerTeacher:
        """Fill values with uniform noise in [min, max] drawn from the given seed.

        The global random state is left untouched.
        """
        rnd = random.Random(seed)
        with self._locked():
            for i in range(self.count):
                self.set_neuron_value(i, rnd.uniform(min_value, max_value))
        self._changed()
        return self

    def fill_value(self, values: Iterable[Any]) -> LayerTeacher:
        """Fill values from a sequence, repeating it cyclically over the layer."""
        source = [float(v) for v in values]
        if self.count and not source:
            raise ValueError("values must not be empty")
        with self._locked():
            for i in range(self.count):
                self.set_neuron_value(i, source[i % len(source)])
        self._changed()
        return self

    def apply_bits(self, bits: Bits) -> LayerTeacher:
        """Set each neuron to 1.0 or 0.0 from the corresponding bit of an identifier.

        Bit i is bit i % 8 of byte i // 8, least significant first; neurons past
        the end of the identifier get 0.0.
        """
        data = bits.bytes if isinstance(bits, UUID) else bytes(bits)
        with self._locked():
            for i in range(self.count):
                byte_index, bit_index = divmod(i, 8)
                bit = byte_index < len(data) and (data[byte_index] >> bit_index) & 1
                self.set_neuron_value(i, 1.0 if bit else 0.0)
        self._changed()
        return self


class LimbTeacher(Limb):
    """Limb of the teacher; layer sizes come from the net configuration."""

    def __init__(self, config: Mapping[str, Any]) -> None:
        super().__init__()
        self.config = config

    def copy_layer_from(self, layer: Layer) -> LayerTeacher:
        """Create a teacher layer with the id of the given layer, sized by the config."""
        result = LayerTeacher(self, layer.id)
        layers_config = self.config.get("layers") or {}
        layer_config = layers_config.get(layer.id)
        if layer_config is not None:
            result.set_size_from_params(layer_config)
        else:
            logger.error("NetAndConfigIsNotConsistents: layer %s", layer.id)
        return result

    def get_layer_by_id(self, layer_id: str) -> Optional[LayerTeacher]:
        """The teacher layer with the id, or None."""
        layer = self.layers.get_by_id(layer_id)
        return layer if isinstance(layer, LayerTeacher) else None