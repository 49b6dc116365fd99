# fdfkit

Building blocks for a wireframe height-map viewer, in pure Python with no
third-party dependencies.

## Modules

- **`fdfkit.matrix`**: `read_matrix(lines, rows, columns)` reads rows of
  integer heights into a `Matrix` of `Point` values (each with `x`, `y`, `z`
  and a `Bgr` colour). It raises `ValueError` when the lines run out before
  all rows are read. `Matrix.set_zoom(width, height, spacing)` fits the grid
  into a window area (scaled by `ZOOM_COEFF`), and
  `Matrix.set_zscale(height)` picks a height scale from the largest absolute
  `z`, kept between `ZOOM_STEP` and `MIN_ZSCALE`.
- **`fdfkit.pixels`**: `new_image(width, height)` returns a blank `Image` of
  32-bit pixels. `Image.put_pixel` and `Image.get_pixel` write and read
  pixels (raising `IndexError` outside the image), and `Image.data_addr()`
  returns a `DataAddress` with the raw buffer, bits per pixel, row size and
  endian. `RgbLayout.from_masks(red_mask, green_mask, blue_mask)` describes
  a true-colour visual, and `RgbLayout.convert(color, depth)` packs a
  `0xRRGGBB` colour for it (displays of 24 bits or more take it unchanged).
- **`fdfkit.xpm`**: `xpm_to_image` and `parse_xpm` build an `Image` from the
  strings of an XPM; `xpm_file_to_image(path)` reads an XPM written as C
  source, dropping comments and taking the quoted strings
  (`extract_strings`). Malformed or short data raises `XpmError`. Pixels
  with the colour `None` get the value `TRANSPARENT`.
- **`fdfkit.colors`**: the X11 colour-name table `COLOR_TABLE`,
  `lookup_color(name)` (case-insensitive, `KeyError` for unknown names) and
  `text_to_rgb(name, end)` for XPM colour specs (`#RRGGBB` or a name;
  unknown names give 0).
- **`fdfkit.textscan`**: text helpers used by the XPM reader:
  `split_words`, `find`, `find_unquoted` and `strip_comments`.

## Installing

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Example

```python
from fdfkit.matrix import read_matrix
from fdfkit.xpm import xpm_to_image
from fdfkit.colors import lookup_color

grid = read_matrix(["0 0 0", "0 10 0", "0 0 0"], rows=3, columns=3)
grid.set_zoom(1920, 1080, 20)
grid.set_zscale(1080)

image = xpm_to_image([
    "2 1 2 1",
    "a c red",
    "b c #00ff00",
    "ab",
])
print(image.get_pixel(0, 0) == lookup_color("red"))  # True
```

## What it does not do

fdfkit has no command-line program and opens no window: it does not project,
draw or display a height map, and it does not handle keyboard or mouse input.
It reads grids and images into memory and computes view parameters; putting
pixels on a screen is left to the caller.