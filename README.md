# lavutil

A small, dependency-free collection of multimedia utility pieces.

## Modules

- `lavutil.memory`: an `Allocator` that hands out `bytearray` blocks no
  larger than a configurable maximum (`max_alloc_size`, changed with
  `set_max_alloc`). Its methods are `malloc`, `mallocz`, `realloc`,
  `realloc_f`, `realloc_array`, `malloc_array`, `mallocz_array`, `calloc`,
  `memdup`, `fast_realloc` and `fast_malloc`. A request that is too large
  raises `MemoryError`; a zero size yields a one-byte block. `fast_realloc`
  and `fast_malloc` return a `(buffer, allocated_size)` pair and only grow
  when the current size is not already larger than the minimum asked for.
  The module also has the helpers `size_mult` (multiplication that raises
  `ValueError` on size overflow), `strndup` (copy up to a length, stopping at
  a NUL) and `grown_size` (the padded size used when a buffer grows).
- `lavutil.backptr`: `memcpy_backptr(buf, pos, back, count)`, the
  deliberately overlapping copy that LZ-style decoders use to repeat a
  pattern with period `back`. Out-of-range arguments raise `ValueError`.
- `lavutil.rational`: the frozen `Rational(num, den)` with `compare`,
  `to_float` (a zero denominator gives `inf`, `-inf` or `nan`) and `inverse`,
  plus `cmp_q`, which returns -1, 0 or 1, or `INT_MIN` when a value is 0/0.
- `lavutil.softfloat`: `SoftFloat(exp, mant)`, the value
  `mant * 2**(exp - 29)`, with `normalize`, `normalize1`, `mul`, `div`,
  `add`, `sub`, `cmp` and `to_int`; the operators `+`, `-`, `*` and `/` map
  to these. `int_to_sf(value, frac_bits)` builds a normalized value.
- `lavutil.sorting`: `quicksort(items, cmp)` (unstable) and
  `merge_sort(items, cmp)` (stable), both sorting a mutable sequence in place
  with a three-way comparison function and returning `None`.
- `lavutil.pixfmt`: the `PixelFormat` enumeration (names starting with a
  digit are spelled `ZERO_RGB`, `ZERO_BGR`), `native_endian(be, le,
  big_endian=None)` which picks the variant for the given or the host byte
  order, and ready-made host-order aliases such as `RGB32`, `GRAY16` and
  `YUV420P10`.
- `lavutil.colorspace`: `ColorPrimaries`, `ColorTransferCharacteristic`,
  `ColorSpace`, `ColorRange` and `ChromaLocation`.
- `lavutil.stereo3d`: `Stereo3DType`, the `Stereo3D(type, flags)` dataclass
  and its `is_inverted` check against `FLAG_INVERT`.
- `lavutil.legacy_pixfmt`: `legacy_pixel_format(name)` looks up the older
  `PIX_FMT_*` names, with or without the prefix and in any case; `"NB"`
  gives the legacy format count as an integer and unknown names raise
  `ValueError`.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Examples

```python
from lavutil.rational import Rational, cmp_q
from lavutil.backptr import memcpy_backptr
from lavutil.sorting import merge_sort
from lavutil.memory import Allocator

half = Rational(1, 2)
print(half.to_float())                   # 0.5
print(cmp_q(half, Rational(2, 3)))       # -1

buf = bytearray(b"ab" + bytes(6))
memcpy_backptr(buf, 2, 2, 6)
print(bytes(buf))                        # b'abababab'

items = [3, 1, 2]
merge_sort(items, lambda a, b: (a > b) - (a < b))
print(items)                             # [1, 2, 3]

alloc = Allocator()
block, size = alloc.fast_realloc(None, 0, 100)
print(len(block) == size)                # True
```

## Scope

This is a library only: it has no command-line interface, and it does not
include hashing, ciphers, option parsing or time and timecode handling.

## Running the tests

```
pytest
```