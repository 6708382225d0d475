"""Activation functions, layers, layer lists, limbs and a teacher limb for a layered neural net."""

__version__ = "0.1.0"
__all__ = ["consts", "func", "layer", "layer_list", "limb", "shape", "teacher"]