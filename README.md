# shoggoth

Building blocks for a layered neural net: activation functions, layers of
neurons with value and error planes, ordered lists of layers, limbs that hold
them and can be synchronised, and a teacher limb that fills layers with
training data.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Activation functions (`shoggoth.func`)

Neuron functions of one argument: `func_null`, `func_zero`, `func_line`,
`func_one`, `func_step`, `func_relu`, `func_sigmoid`, `func_sigmoid_back`
and `func_sigmoid_derivative`.

Limiting helpers: `sigmoid_line_minus_plus(x, sensitivity)`,
`v_line(x, sensitivity)`, `sigmoid_plus_minus(x, sensitivity)`,
`weight_limit(x, min_value, max_value)` and `error_limit(x, max_value)`.
`weight_limit` clamps to `[-max, max]` and pushes values inside the
`(-min, min)` gap out of it: small non-negative values become `-min`, small
negative values become `+min`.

Functions can be looked up by name and named back:

```python
from shoggoth.func import str_to_func, func_to_str, func_relu

assert str_to_func("RELU") is func_relu
assert func_to_str(func_relu) == "RELU"
```

The known names are `NULL`, `ZERO`, `LINE`, `ONE`, `STEP`, `RELU`,
`SIGMOID` and `SIGMOID_BACK`. An unknown name gives `func_null`; a function
that is not in this table is named `"NULL"`.

## Shapes and flags (`shoggoth.shape`)

`Size3(x, y, z)` is a frozen three-dimensional size or position with
`volume()`, `index_by_pos(pos)` and `pos_by_index(index)` (the latter raises
`IndexError` outside the box). `ErrorCalc` (`NONE`, `LEARNING`, `VALUE`) and
`WeightCalc` (`NONE`, `CALC`) are the per-layer calculation flags.

## Layers (`shoggoth.layer`)

A `Layer` holds a values plane and an errors plane of floats, sized by
`set_size(Size3(...))` or `set_size_from_params({"size": [x, y, z]})`.
Changing the neuron count resets both planes to zero.

- Neuron access: `set_neuron_value`, `get_neuron_value`, `set_neuron_error`,
  `get_neuron_error`. An index outside the layer (or an empty layer) raises
  `LayerError`, whose `code` names the failure.
- Aggregates: `calc_sum_value()`, `calc_sum_error()` (sum of absolute
  errors), `calc_rms_value()` (zero for an empty layer).
- Raw planes: `values_buffer()` / `errors_buffer()` return bytes;
  `set_values_from_buffer(buf)` / `set_errors_from_buffer(buf)` load them
  and return `False`, changing nothing, when the size does not match.
- `copy_values_from(other)` / `copy_errors_from(other)` copy from a layer of
  the same count and raise `LayerError` otherwise.
- `compare(other)` is true when id, count, name, functions and flags match.
- Statistics: `stat()`, `drop_tick_count()` and
  `write_errors_before_change()` append to the `chart_values`,
  `chart_errors`, `chart_tick` and `chart_errors_before_change` deques.

## Layer lists and limbs (`shoggoth.layer_list`, `shoggoth.limb`)

`LayerList` keeps layers in insertion order and supports `len`, iteration,
indexing, `push`, `extend`, `remove(index)`, `index_by_id`, `get_by_id`,
`clear`, `compare`, `copy_values_from` and `copy_errors_from`.

A `Limb` owns a `LayerList` in `layers`, guarded by a re-entrant `lock`:

```python
from shoggoth.limb import Limb
from shoggoth.shape import Size3

limb = Limb()
layer = limb.create_layer("retina")
layer.set_size(Size3(4, 4, 1))
layer.set_neuron_value(0, 0.5)
print(layer.calc_sum_value(), layer.calc_rms_value())
```

`create_layer` returns the existing layer when the id is already present;
`delete_layer` ignores unknown ids. `copy_to(other, strict_sync)` copies
values and errors into another limb when both have equal layer structures;
with `strict_sync` it first rebuilds the other limb's structure through
`copy_structure_from` when they differ. Copying a limb to itself raises
`LimbError`. The limb records `last_change_structure` and
`last_change_values` as microsecond timestamps.

## Teacher (`shoggoth.teacher`)

`LimbTeacher(config)` builds `LayerTeacher` layers when its structure is
copied from another limb, sizing each from
`config["layers"][layer_id]["size"]` (a missing entry is logged and the
layer stays empty). `LayerTeacher` adds:

- `noise_value(seed, min_value, max_value)`: uniform noise from a private
  seeded generator; the global random state is untouched.
- `fill_value(values)`: repeats the sequence over the layer; an empty
  sequence for a non-empty layer raises `ValueError`.
- `apply_bits(bits)`: sets neurons to 1.0 or 0.0 from the bits of bytes or
  a `uuid.UUID`, least significant bit of each byte first.

## Constants (`shoggoth.consts`)

`TeacherTask` and `Role` with `teacher_task_to_string`,
`string_to_teacher_task` (unknown names give `TeacherTask.UNKNOWN`),
`role_to_string` and `role_from_string` (unknown names give
`Role.PROCESSOR`).

## What this package does not do

It is a library only: there is no command to run, no server or network
communication, no nerves or weights between layers, no forward or backward
computation, no image loading into layers, and no reading or writing of
layers to files. Training batches must be driven by your own code through
the `LayerTeacher` methods above.