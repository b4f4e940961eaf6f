# grayworks

A small collection of tools for uncompressed 8-bit grayscale BMP images,
together with two text filters and a uniform cost search demonstration.
It needs nothing outside the standard library.

Images are handled as lists of rows of integers (gray levels 0–255), with
row 0 at the top of the picture.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

| Command | Arguments | What it does |
| --- | --- | --- |
| `grayworks-bmpcopy` | `in-file out-file` | Prints the size of `in-file` and writes its pixels into `out-file`, which must already be an 8-bit BMP of at least the same size. |
| `grayworks-crop` | `in-image out-image length width [il ie]` | Creates `out-image` holding the `length` × `width` block whose top-left pixel is row `il`, column `ie` (both 0 when left out). |
| `grayworks-stega` | `-h cover message n` | Hides `message` in the lowest bits of `cover`, which must have the same number of rows and be `n` times as wide; `cover` is rewritten in place. `n` lies between 1 and 8. |
| `grayworks-stega` | `-u cover message n` | Creates `message` with the rows of `cover` and `1/n` of its width and fills it with the bits read back from `cover`. |
| `grayworks-showi` | `image il ie` | Shows a 20 × 15 window of pixel values on the terminal; `j` `k` move down and up by 15 rows, `h` `l` left and right by 11 columns, `x` quits. A window that does not fit in the image is reported instead of shown. |
| `grayworks-emboss` | `in-file out-file type` | Creates `out-file` and writes into it the image embossed with mask `type` (0 to 13). |
| `grayworks-texc` | `in-file out-file` | Puts a backslash in front of every `_ $ # & { } ^ ~ % \` in each line. |
| `grayworks-para` | `in-file out-file` | Refills paragraphs (separated by blank lines) into lines of at most 65 characters, each paragraph followed by a blank line. |
| `grayworks-ucs` | `goal-node` | Runs uniform cost search from node 0 on a built-in ten-node graph and prints the nodes from the goal back to the start. |

Example:

```
grayworks-crop photo.bmp corner.bmp 100 120 10 20
grayworks-emboss photo.bmp raised.bmp 3
grayworks-texc notes.txt notes.tex
grayworks-ucs 9
```

Errors are printed with an `ERROR` prefix and the command returns a
non-zero status.

## Library use

Reading, processing and writing an image:

```python
from grayworks.bmpheaders import create_bmp_file
from grayworks.bmpimage import get_image_size, read_image_array, write_image_array
from grayworks.emboss import emboss_convolution

image = read_image_array("photo.bmp")
rows, cols = get_image_size("photo.bmp")

create_bmp_file("raised.bmp", rows, cols)
write_image_array("raised.bmp", emboss_convolution(image, 3, 8))
```

`write_image_array` and `write_bmp_image` write into a file that already
exists; make one first with `create_bmp_file(path, height, width)` or
`create_bmp_file_if_needed(in_path, out_path)`.

### `grayworks.bmpheaders`

- `BmpFileHeader` and `BitmapHeader` – the two BMP headers as dataclasses;
  `describe()` returns a short text summary.
- `read_file_header(path)`, `read_bitmap_header(path)`,
  `read_color_table(path, size)` – read header fields and (blue, green, red)
  colour-table entries.
- `calculate_pad(width)` – padding bytes at the end of each pixel row.
- `create_bmp_file(path, height, width)` – write a zero-filled 8-bit BMP and
  return its two headers.
- `is_a_bmp(path)` – true when the name contains `.bmp` and the file starts
  with the BMP magic number.
- `BmpError` – raised for short, malformed or non-8-bit files.

### `grayworks.bmpimage`

`read_bmp_image`, `write_bmp_image`, `read_image_array`,
`write_image_array`, `get_image_size` (returns `(rows, cols)`),
`get_bits_per_pixel`, `flip_image` and `create_bmp_file_if_needed`.
Pixels are read through the colour table; on writing, a gray-ramp colour
table is stored and only the low byte of each value is kept.

### Other modules

- `grayworks.crop.crop_image(image, length, width, il, ie)` – cut out a block;
  raises `ValueError` when it does not fit.
- `grayworks.stega.hide_image(cover, message, n, lsb)` and
  `grayworks.stega.uncover_image(cover, n, lsb)` – hide and recover an image
  in the lowest bit of each cover pixel. With `n = 8`, `uncover_image`
  recovers what `hide_image` hid. `is_odd(number)` is also available.
- `grayworks.viewer` – `render_screen(image, il, ie)`, `is_in_image`,
  `bounds_problems` and `apply_command(command, il, ie)` behind the viewer.
- `grayworks.emboss.emboss_mask(kind)` and
  `grayworks.emboss.emboss_convolution(image, kind, bits_per_pixel)` – border
  pixels are kept, results are clipped to 0..255 (0..16 for 4 bits), and masks
  7 to 13 divide the result by three.
- `grayworks.glyphs.glyph(char)` – the 9 × 7 block pattern for a lower-case
  letter, a digit, `.`, `,`, `!` or space, or `None`.
- `grayworks.labels.copy_glyph_into_image(pattern, image, il, ie)` and
  `grayworks.labels.draw_words(image, words, il, ie)` – stamp patterns into an
  image in place; after nine cells the text moves down to a new line.
- `grayworks.texc.escape_line(line)` and `insert_slash(source, target)`.
- `grayworks.para.split_words`, `read_paragraphs`, `format_paragraph` and
  `format_stream(source, target)`.
- `grayworks.search.uniform_cost_search(goal, cost_matrix)` – returns the goal
  `Node`; `Node.path()` gives the nodes from the start to it. Raises
  `NoSolutionError` when the goal cannot be reached.

## What it does not do

- Only uncompressed 8-bit BMP files are read and written. Other bit depths
  raise `BmpError`, and TIFF or any other image format is not supported.
- Labels can be drawn into an image in memory only; there is no command that
  stamps text into an image file.