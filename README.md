# audiofp

This package gives you small building blocks for audio fingerprinting. They are written in pure Python and need no other packages.

## Installation

```
pip install audiofp
```

To run the test suite, install the test extra and then run pytest:

```
pip install "audiofp[test]"
pytest
```

## Modules

### `audiofp.base64`

Encodes and decodes URL-safe base64 with no padding. The alphabet is `A-Z a-z 0-9 - _`.

```python
from audiofp.base64 import encode, decode, encoded_size, decoded_size

encode(b"xx")          # "eHg"
decode("_-4")          # b"\xff\xee"
encoded_size(5)        # 7
decoded_size(7)        # 5
```

Both `encode` and `decode` take either `str` or bytes-like input. `decode` never raises for a character outside the alphabet; it reads that character as zero. The result is always `decoded_size(len(text))` bytes long.

### `audiofp.bitpack`

Packs small integers densely into bytes, lowest bits first. Two widths are supported:

| Bits per value | Pack with | Unpack with |
|---|---|---|
| 3 | `pack_int3_array` | `unpack_int3_array` |
| 5 | `pack_int5_array` | `unpack_int5_array` |

When packing, only the low 3 or 5 bits of each value are kept.

```python
from audiofp.bitpack import pack_int3_array, unpack_int3_array

packed = pack_int3_array([1, 2, 3, 4, 5, 6, 7, 0])   # 3 bytes
unpack_int3_array(packed)                            # [1, 2, 3, 4, 5, 6, 7, 0]
```

You can work out result lengths ahead of time with these helpers:

- `packed_int3_array_size`
- `packed_int5_array_size`
- `unpacked_int3_array_size`
- `unpacked_int5_array_size`

Unpacking returns every whole value the bytes can hold. Because of this, when a packed length is not a multiple of 8 values, the unpacked list can end with extra zeros.

### `audiofp.slicer`

`AudioSlicer(size, increment)` takes samples that arrive in chunks of any length and cuts them into overlapping windows. Every window holds `size` samples. Each window starts `increment` samples after the previous one.

```python
from audiofp.slicer import AudioSlicer

slicer = AudioSlicer(4, 2)
for chunk in ([0], [1, 2], [3, 4, 5], [6, 7, 8], [9]):
    for window in slicer.process(chunk):
        print(window)
# [0, 1, 2, 3]
# [2, 3, 4, 5]
# [4, 5, 6, 7]
# [6, 7, 8, 9]
```

- `process(samples)` returns a list of the windows that the new samples complete.
- Samples that do not yet fill a window are held until the next call to `process`.
- `reset()` discards any held samples.
- The constructor raises `ValueError` when `increment` is less than 1, or when `size` is smaller than `increment`.

### `audiofp.gaussian`

- `box_filter(values, width)` returns the moving average over `width` samples. The signal is mirrored at both ends. A width of 0 gives a list of zeros.
- `gaussian_filter(values, sigma, n)` approximates a Gaussian blur with standard deviation `sigma`. It does this by applying the box filter `n` times. It raises `ValueError` when `n` is less than 1.

### `audiofp.gradient`

`gradient(values)` returns a list the same length as `values`:

- Interior points use central differences.
- The two end points use one-sided differences.
- A single value has a gradient of `0`.

### `audiofp.integral_image`

`RollingIntegralImage(max_rows)` keeps a summed-area table over the rows most recently added to it. It answers rectangle sums in constant time.

```python
from audiofp.integral_image import RollingIntegralImage

image = RollingIntegralImage(4)
image.add_row([1, 2, 3])
image.add_row([4, 5, 6])
image.area(0, 0, 2, 3)   # 21.0
image.area(1, 1, 2, 2)   # 5.0
```

**Shape.** The first row you add fixes the width. After that, `add_row` raises `ValueError` for a row of any other length.

**Properties.** `num_rows` gives the total number of rows added. `num_columns` gives the width. `reset()` clears both.

**Rectangles.** `area(r1, c1, r2, c2)` uses half-open bounds on rows and columns. It raises:

- `IndexError` when an index is past the end of the image.
- `IndexError` when the rectangle reaches back to rows that are no longer kept.
- `ValueError` when the corners are given in the wrong order.

## What it does not do

This package only provides the separate pieces listed above. It does not:

- read or decode audio files,
- resample audio,
- compute a complete fingerprint from audio,
- offer a command-line tool.