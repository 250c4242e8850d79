"""hexcolour.core — Foundation layer.

Contains the codec, colour types, palette, Pillow adapter, configuration and
report builder. This module has NO dependencies on hexcolour.commands or
hexcolour.registry. Only stdlib, numpy, and PIL are allowed here.
"""
