# cubscene

Building blocks for tools that work with `.cub` scene files, the small text
format that describes a grid-based raycasting level: four wall textures, a
floor and a ceiling colour, and a map drawn in characters.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Texture lines

`cubscene.textures` reads the wall texture lines of a scene
(`NO`, `SO`, `WE`, `EA`).

```python
from cubscene.textures import parse_texture_line, is_unknown_identifier

entry = parse_texture_line("NO ./textures/north.xpm")
# TextureEntry(identifier='NO', path='./textures/north.xpm', valid=True)

parse_texture_line("F 220,100,0")   # None: not a texture line
is_unknown_identifier("X foo")      # True: no identifier starts with X
```

A texture line is valid when it holds a `.` and a `/` and only spaces come
between the identifier and the path. `extract_path(line, start)` returns the
path starting at the first `.` from `start`, with the validity flag.

## Images

`cubscene.image.Image` is an in-memory image of 32-bit colours.

```python
from cubscene.image import Image, TRANSPARENT

canvas = Image(4, 4)
sprite = Image(2, 1, [0x00FF00, TRANSPARENT])
canvas.paste(sprite, 1, 1)
canvas.get_pixel(1, 1)   # 0x00FF00
```

`put_pixel` ignores positions outside the image and the colour
`TRANSPARENT` (`0xFF000000`); `paste` draws another image through
`put_pixel`, so it clips and skips transparent pixels; `copy_pixel` copies a
single pixel when both positions lie inside their images. `get_pixel` raises
`IndexError` outside the image.

## Timing

`cubscene.clock.now_ms()` gives the wall-clock time in milliseconds.
`Clock().elapsed_ms()` returns 0 on its first call and the milliseconds since
that call afterwards; a different time source can be passed as `source`.

## General helpers

- `cubscene.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `is_space`) and `to_lower` /
  `to_upper`, on one-character strings or integer codes.
- `cubscene.numbers`: `atoi` (32-bit result, leading whitespace skipped),
  `atol` (64-bit result) and `itoa`.
- `cubscene.strings`: `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`,
  `strjoin`, `strlcpy`, `strlcat`, `strmapi`, `striteri`, `strtrim`,
  `substr` and `split`. Searches return an index or `None`.
- `cubscene.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy` and `memmove` on `bytearray` buffers.
- `cubscene.output`: `putchar_fd`, `putstr_fd`, `putstr`, `putendl_fd` and
  `putnbr_fd` writing to text streams.
- `cubscene.linkedlist`: `LinkedList` of `Node`s with `push_front`,
  `push_back`, `last`, `clear`, `iterate`, `map`, `display`, `len()` and
  iteration.
- `cubscene.arrays`: `array_find`, `array_ndup`, `array_pop`, `array_shift`,
  `array_push`, `array_unshift` and `array_print` on lists of strings; the
  functions that add or remove return a new list.

## What the package does not do

It does not read a whole scene file. There is no command to run, no parsing
of the floor and ceiling colour lines, no building of the map grid, no check
that the map is closed or that it has exactly one start position, and no
rendering or game loop. The pieces above can be used to build those.

## Tests

```
pip install .[test]
pytest
```