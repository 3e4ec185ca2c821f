# starfield

A small night-sky screen saver. A field of stars twinkles and now and then
shoots off or falls; a ringed moon with an orbiting satellite drifts by; a
space ship crosses the sky; an astronaut tumbles past; a few wish worms inch
along in random directions; and an analogue clock showing the current time
bounces around the screen, wobbling when it hits an edge.

## Installing

```
pip install .
```

## Running

```
starfield
```

This opens a 640×480 window. The number of stars and worms can be given on
the command line:

```
starfield star 20 worm 10
```

The keywords are not case sensitive. A keyword with no value after it is an
error: the command prints a message and exits with status 2.

The counts can also come from the `STAR` environment variable, in the same
form:

```
STAR="star 200 worm 5" starfield
```

In the environment variable, a zero or missing number keeps the default of
500 stars or 3 worms. Command-line values win over the environment, and a
zero given there really means none. A negative count, or one too large
(more than 4662 stars or 4080 worms), falls back to the default.

When the saver ends it prints a short usage hint and the running time in
timer ticks (about 18.2 per second).

## Keys

| Key     | Effect                                           |
|---------|--------------------------------------------------|
| `F`     | toggle fire-fly mode (stars dart off at random)  |
| `R`     | send every star racing off in a random direction |
| `Space` | make every star fall                             |
| `C`     | hide or show the clock                           |
| `Q`     | quit                                             |

Closing the window also quits. The saver stops by itself after 1000 frames
in all, at about 70 frames a second.

## Using it as a library

The sprites — `Star`, `Moon`, `SpaceShip`, `Man`, `WishWorm` and
`ClockFace` — each take a canvas and an optional `random.Random`, and have
`draw()` to advance one frame and `erase()` to remove themselves. They draw
on any object with the methods of `starfield.canvas.Canvas`, an in-memory
16-colour raster. `RecordingCanvas` also keeps a log of every call, which
makes the sprites easy to inspect without a window:

```python
from starfield.canvas import RecordingCanvas
from starfield.moon import Moon

canvas = RecordingCanvas()
moon = Moon(canvas)
moon.draw()
print(canvas.log)
```

`starfield.app.parse_settings(argv, environ)` turns an argument list and an
environment mapping into a `Settings` value. `starfield.app.Scene` holds
every sprite and advances them with `step()`; `handle_key()` reacts to the
keys above and `close()` erases everything. `starfield.app.run(settings)`
opens a pygame window and plays the scene.

## What it does not do

It is a plain window program: it does not hook into a desktop's screen-saver
service, start on idle, or lock the screen.

## Tests

```
pip install .[test]
pytest
```