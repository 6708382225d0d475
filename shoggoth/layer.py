"""A layer of neurons: values and errors planes plus statistics."""

from __future__ import annotations

import math
import uuid
from array import array
from collections import deque
from typing import Any, Mapping, Optional, Protocol

from .func import NeuronFunc, func_null
from .shape import ErrorCalc, Size3, WeightCalc

_TICK_CHART_LIMIT = 1000


class LayerError(Exception):
    """Raised when a layer operation cannot be performed."""

    def __init__(self, code: str, message: str = "") -> None:
        super().__init__(message or code)
        self.code = code


class _LimbLike(Protocol):
    def on_change_values(self) -> Any: ...


class Layer:
    """A three-dimensional block of neurons holding values and errors."""

    def __init__(self, limb: Optional[_LimbLike], layer_id: Optional[str] = None) -> None:
        self.limb = limb
        self.id: str = layer_id if layer_id else str(uuid.uuid4())
        self.name: str = ""
        self.storage_path: str = ""
        self.size: Size3 = Size3()
        self.error_change: bool = False

        self.front_func: NeuronFunc = func_null
        self.back_func: NeuronFunc = func_null
        self.back_func_out: NeuronFunc = func_null
        self.error_calc: ErrorCalc = ErrorCalc.NONE
        self.weight_calc: WeightCalc = WeightCalc.NONE

        self.tick_count: int = -1
        self.chart_values: deque[float] = deque()
        self.chart_errors: deque[float] = deque()
        self.chart_tick: deque[float] = deque(maxlen=_TICK_CHART_LIMIT)
        self.chart_errors_before_change: deque[float] = deque(maxlen=_TICK_CHART_LIMIT)

        self._values = array("d")
        self._errors = array("d")

    def __repr__(self) -> str:
        return f"Layer(id={self.id!r}, name={self.name!r}, size={self.size})"

    def _changed(self) -> None:
        if self.limb is not None:
            self.limb.on_change_values()

    # Dimensions

    @property
    def count(self) -> int:
        """Number of neurons in the layer."""
        return len(self._values)

    def _set_count(self, count: int) -> None:
        if count != self.count:
            self._values = array("d", bytes(8 * count))
            self._errors = array("d", bytes(8 * count))
            self._changed()

    def set_size(self, size: Size3) -> Layer:
        """Resize the layer; all values and errors are reset on a change of count."""
        self._set_count(size.volume())
        self.size = size
        self._changed()
        return self

    def set_size_from_params(self, params: Mapping[str, Any]) -> Layer:
        """Resize from a mapping holding a "size" sequence of up to three ints."""
        raw = params.get("size")
        if raw is not None:
            dims = [int(v) for v in list(raw)[:3]]
            dims += [0] * (3 - len(dims))
            self.set_size(Size3(*dims))
        return self

    def index_by_pos(self, pos: Size3) -> int:
        """Linear index of the neuron at the given position."""
        return self.size.index_by_pos(pos)

    # Names and paths

    @property
    def name_or_id(self) -> str:
        """The name of the layer, or its id when it has no name."""
        return self.name or self.id

    @property
    def layer_path(self) -> str:
        """Directory of the layer inside the storage path."""
        return f"{self.storage_path}/{self.id}" if self.storage_path else ""

    @property
    def storage_value_name(self) -> str:
        """File holding the layer values."""
        return f"{self.layer_path}/value.bin" if self.storage_path else ""

    # Planes

    def clear_values(self) -> Layer:
        """Set every neuron value to zero."""
        self._values = array("d", bytes(8 * self.count))
        self._changed()
        return self

    def clear_errors(self) -> Layer:
        """Set every neuron error to zero."""
        self._errors = array("d", bytes(8 * self.count))
        self._changed()
        return self

    @property
    def values_buffer_size(self) -> int:
        """Size in bytes of the values (and errors) buffer."""
        return self._values.itemsize * self.count

    def values_buffer(self) -> bytes:
        """Raw bytes of the values plane."""
        return self._values.tobytes()

    def errors_buffer(self) -> bytes:
        """Raw bytes of the errors plane."""
        return self._errors.tobytes()

    def set_values_from_buffer(self, buffer: bytes) -> bool:
        """Load values from raw bytes; a buffer of the wrong size is ignored."""
        if buffer is None or len(buffer) != self.values_buffer_size:
            return False
        values = array("d")
        values.frombytes(bytes(buffer))
        self._values = values
        self._changed()
        return True

    def set_errors_from_buffer(self, buffer: bytes) -> bool:
        """Load errors from raw bytes; a buffer of the wrong size is ignored."""
        if buffer is None or len(buffer) != self.values_buffer_size:
            return False
        errors = array("d")
        errors.frombytes(bytes(buffer))
        self._errors = errors
        return True

    # Aggregates

    def calc_sum_error(self) -> float:
        """Sum of absolute neuron errors."""
        return sum(abs(e) for e in self._errors)

    def calc_sum_value(self) -> float:
        """Sum of neuron values."""
        return sum(self._values)

    def calc_rms_value(self) -> float:
        """Root mean square of neuron values, zero for an empty layer."""
        if not self.count:
            return 0.0
        return math.sqrt(sum(v * v for v in self._values) / self.count)

    # Neuron access

    def set_neuron_value(self, index: int, value: float) -> Layer:
        """Set the value of one neuron."""
        if not self._values:
            raise LayerError("ValueArrayNotDefinedForSet")
        if not 0 <= index < self.count:
            raise LayerError("IndexValueOutOfRangeForSet", f"index {index} out of range")
        self._values[index] = value
        return self

    def get_neuron_value(self, index: int) -> float:
        """Return the value of one neuron."""
        if not self._values:
            raise LayerError("ValueArrayNotDefinedForGet")
        if not 0 <= index < self.count:
            raise LayerError("IndexValueOutOfRangeForGet", f"index {index} out of range")
        return self._values[index]

    def set_neuron_error(self, index: int, value: float) -> Layer:
        """Set the error of one neuron."""
        if not self._errors or not 0 <= index < self.count:
            raise LayerError("SetIndexValueOutOfRange", f"index {index} out of range")
        self._errors[index] = value
        return self

    def get_neuron_error(self, index: int) -> float:
        """Return the error of one neuron."""
        if not self._errors or not 0 <= index < self.count:
            raise LayerError("GettingIndexValueOutOfRange", f"index {index} out of range")
        return self._errors[index]

    # Copying and comparison

    def copy_values_from(self, other: Layer) -> Layer:
        """Copy the values plane of another layer of the same count."""
        if not self._values or not other._values or self.count != other.count:
            raise LayerError("LayersValuePlanNotEquals")
        self._values = array("d", other._values)
        return self

    def copy_errors_from(self, other: Layer) -> Layer:
        """Copy the errors plane of another layer of the same count."""
        if not self._errors or not other._errors or self.count != other.count:
            raise LayerError("LayersErrorPlanNotEquals")
        self._errors = array("d", other._errors)
        return self

    def compare(self, other: Optional[Layer]) -> bool:
        """True when the other layer has the same structure and settings."""
        if other is None:
            return False
        return (
            self.id == other.id
            and self.count == other.count
            and self.name == other.name
            and self.front_func is other.front_func
            and self.back_func is other.back_func
            and self.back_func_out is other.back_func_out
            and self.error_calc == other.error_calc
            and self.weight_calc == other.weight_calc
        )

    # Statistics

    def stat(self) -> Layer:
        """Count a tick and record the current value and error sums."""
        if self.tick_count >= 0:
            self.tick_count += 1
        self.chart_values.append(self.calc_sum_value())
        self.chart_errors.append(self.calc_sum_error())
        return self

    def drop_tick_count(self) -> Layer:
        """Record the tick count into its chart and restart counting."""
        if self.tick_count >= 0:
            self.chart_tick.append(float(self.tick_count))
        self.tick_count = 0
        return self

    def write_errors_before_change(self) -> Layer:
        """Record the error sum before the layer is changed by others."""
        if self.tick_count >= 0:
            self.chart_errors_before_change.append(self.calc_sum_error())
        return self