"""Vectorised conversions over numpy arrays.

Same semantics as colour_kit.convert, applied element-wise:
  - unpack: int array (...)      -> float64 array (..., 4) of r, g, b, a
  - pack:   float array (..., 4) -> int64 array (...)
  - alpha_blend broadcasts like numpy arithmetic.

Rounding is np.rint (half-to-even), matching the scalar round(). Nothing is
clamped except in to_image_array, whose uint8 output cannot hold
out-of-range bytes.

Example:
    unpack_rgb(np.array([0xFF8000, 0x000000]))
        -> [[1.0, 0.50196, 0.0, 1.0], [0.0, 0.0, 0.0, 1.0]]
"""

import numpy as np

from colour_kit.core.layout import ARGB, RGB, RGBA, Layout, get_layout

_INV = 1.0 / 255.0
_CHANNEL_INDEX = {'r': 0, 'g': 1, 'b': 2, 'a': 3}


def _as_channels(channels) -> np.ndarray:
    """Coerce to float64 (..., 4). A trailing axis of 3 gets alpha 1.0."""
    arr = np.asarray(channels, dtype=np.float64)
    if arr.ndim == 0 or arr.shape[-1] not in (3, 4):
        raise ValueError(f'channels must have a trailing axis of 3 or 4, got shape {arr.shape}')
    if arr.shape[-1] == 3:
        alpha = np.ones(arr.shape[:-1] + (1,), dtype=np.float64)
        arr = np.concatenate([arr, alpha], axis=-1)
    return arr


_LOW_32 = 0xFFFFFFFF


def _masked_ints(values) -> np.ndarray:
    """Low 32 bits of each value as int64, for any Python int size or sign.

    Values past int64 arrive as uint64 or object arrays; negatives keep their
    two's-complement low bits, as with a scalar int.
    """
    try:
        arr = np.asarray(values)
    except OverflowError:
        arr = np.asarray(values, dtype=object)
    if arr.size == 0:
        return np.zeros(arr.shape, dtype=np.int64)
    if arr.dtype.kind == 'i':
        return arr.astype(np.int64) & _LOW_32
    if arr.dtype.kind == 'u':
        return (arr.astype(np.uint64) & np.uint64(_LOW_32)).astype(np.int64)
    if arr.dtype.kind == 'O':
        return np.asarray(np.frompyfunc(lambda v: int(v) & _LOW_32, 1, 1)(arr), dtype=np.int64)
    raise TypeError(f'packed colours must be integers, got dtype {arr.dtype}')


def unpack(values, layout: str | Layout) -> np.ndarray:
    """Decode packed integers into float channels. Bits above the layout are ignored."""
    layout = get_layout(layout)
    ints = _masked_ints(values)
    out = np.ones(ints.shape + (4,), dtype=np.float64)
    for ch, shift in layout.shifts.items():
        out[..., _CHANNEL_INDEX[ch]] = _INV * ((ints >> shift) & 0xFF)
    return out


def pack(channels, layout: str | Layout) -> np.ndarray:
    """Encode float channels as packed integers. Out-of-range bytes are not masked.

    NaN or infinite channels raise ValueError.
    """
    layout = get_layout(layout)
    arr = _as_channels(channels)
    if not np.all(np.isfinite(arr)):
        raise ValueError('channels must be finite, got NaN or infinity')
    bytes_ = np.rint(arr * 255.0).astype(np.int64)
    value = np.zeros(arr.shape[:-1], dtype=np.int64)
    for ch, shift in layout.shifts.items():
        value |= bytes_[..., _CHANNEL_INDEX[ch]] << shift
    return value


def unpack_rgb(values) -> np.ndarray:
    return unpack(values, RGB)


def unpack_rgba(values) -> np.ndarray:
    return unpack(values, RGBA)


def unpack_argb(values) -> np.ndarray:
    return unpack(values, ARGB)


def pack_rgb(channels) -> np.ndarray:
    return pack(channels, RGB)


def pack_rgba(channels) -> np.ndarray:
    return pack(channels, RGBA)


def pack_argb(channels) -> np.ndarray:
    return pack(channels, ARGB)


def alpha_blend(background, overlap, alpha) -> np.ndarray:
    """background + (overlap - background) * alpha, broadcast, unclamped.

    A per-pixel alpha of shape (...) is broadcast across the channel axis.
    """
    bg = _as_channels(background)
    ov = _as_channels(overlap)
    a = np.asarray(alpha, dtype=np.float64)
    if a.ndim > 0:
        a = a[..., np.newaxis]
    return bg + (ov - bg) * a


def from_image_array(arr) -> np.ndarray:
    """uint8 image (H, W, 3|4) -> float channels (H, W, 4)."""
    img = np.asarray(arr)
    if img.ndim != 3 or img.shape[-1] not in (3, 4):
        raise ValueError(f'expected an (H, W, 3|4) image array, got shape {img.shape}')
    return _as_channels(img.astype(np.float64) * _INV)


def to_image_array(channels) -> np.ndarray:
    """float channels (..., 4) -> uint8 RGBA, clipped to 0..255."""
    arr = _as_channels(channels)
    return np.clip(np.rint(arr * 255.0), 0, 255).astype(np.uint8)
