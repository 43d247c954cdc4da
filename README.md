# threepointcircle

Place three points on an 8-bit grayscale canvas. The package draws a small
black disc at each point and the circle through all three points as a black
ring of a chosen thickness. After that you can drag the points, move all
three to random places, or clear the canvas and start again. If the three
points lie on one line, no circle passes through them. The markers are still
drawn, but the ring is left out.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
threepointcircle [options]
```

The command replays a sequence of clicks on a canvas. It can then move the
points at random, and it writes the finished image as a binary PGM file.

| Option | Default | Meaning |
| --- | --- | --- |
| `--width`, `--height` | 1280, 800 | canvas size in pixels |
| `--radius` | 10 | radius of the point markers |
| `--thickness` | 5 | line thickness of the circle |
| `--click X,Y` | | press and release at X,Y; repeat the option for more clicks |
| `--random N` | 0 | move the points to random places N times |
| `--interval S` | 0 | seconds to wait after each of those random moves |
| `--loop` | | then make 10 more random moves, 0.5 s apart |
| `--seed` | | seed for the random moves |
| `--output`, `-o` | | file to write the PGM image to |

Random moves do nothing until three points have been placed. After the run,
the command prints one line for each point shown, in this form:

```
(200, 200) at 210,210
```

The first part is the point's coordinates. The second part is where its
label goes: the point moved right and down by the marker radius.

Example:

```
threepointcircle --click 200,200 --click 600,150 --click 400,500 -o circle.pgm
```

## Library use

### `threepointcircle.geometry`

- `is_in_circle(x, y, center_x, center_y, radius)` returns True when the
  point is strictly inside the circle.
- `is_unbounded(x)` returns True for infinite values and NaN.
- `circumcircle(p1, p2, p3)` returns a frozen `Circle` dataclass with
  `center_x`, `center_y` and `radius`. It raises `CollinearPointsError`, a
  subclass of `ValueError`, when no circle can be formed. The centre comes
  from the perpendicular bisectors of p1–p2 and p1–p3. The midpoints of
  those segments are truncated to whole pixels first, so the centre is
  approximate.

```python
from threepointcircle.geometry import circumcircle, CollinearPointsError

circle = circumcircle((100, 100), (300, 100), (200, 250))
print(circle.center_x, circle.center_y, circle.radius)

try:
    circumcircle((0, 0), (10, 10), (20, 20))
except CollinearPointsError:
    print("the points are on one line")
```

### `threepointcircle.canvas.Canvas`

`Canvas(width, height)` is a grayscale image that starts white. It raises
`ValueError` if either size is not positive. The pixels are kept row by row
in the `pixels` bytearray.

- `clear()` paints every pixel white.
- `contains(x, y)` tells whether the point is on the canvas.
- `pixel(x, y)` reads one value. It raises `IndexError` for a point off the
  canvas.
- `draw_disc(x, y, radius, gray)` fills a disc. Parts that fall off the
  canvas are clipped.
- `draw_ring(points, thickness)` draws the circle through three points. The
  ring reaches half the thickness to each side of the circle, and at least
  one pixel. It returns the `Circle`, or `None` when the points are collinear
  and nothing is drawn.
- `to_pgm()` returns the image as binary PGM (`P5`) bytes.

### `threepointcircle.editor.CircleEditor`

`CircleEditor(width, height, radius, thickness, rng)` holds the interactive
state. `radius` is the marker radius. `rng` is a `random.Random`, used for
random moves.

- `press(x, y)` is a button press. The first two presses place markers. The
  third places the last marker and draws the ring.
- `move(x, y)` moves the pointer. Points can be dragged once more than three
  presses have been made: with the button held, start the motion inside a
  marker, and that point follows the pointer. The image is redrawn while it
  moves. `move` returns True when it redrew the image.
- `release()` lets go of the button.
- `randomize(radius=None, thickness=None)` moves the three points to random
  places and redraws. It can also redraw with another marker radius or ring
  thickness. It returns False, and does nothing, until three points exist.
- `reset()` clears the canvas and forgets all points.
- `labels()` returns one `(x, y, text)` entry for each point shown, giving
  where its coordinate label goes and what it says.
- The state is open to read: `canvas`, `points`, `click_count`, `radius` and
  `thickness`.

```python
import random
from threepointcircle.editor import CircleEditor

editor = CircleEditor(1280, 800, 10, 5, random.Random(1))
for x, y in [(200, 200), (600, 150), (400, 500)]:
    editor.press(x, y)
    editor.release()
print(editor.labels())
```

## What it does not do

There is no window or on-screen display. The mouse handling is available
through `CircleEditor` calls and the command's `--click` option. Images can
only be written as PGM. Points and settings are not saved between runs.