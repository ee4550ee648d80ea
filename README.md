# minkgame

A small framework for 2D games built on pygame and numpy. You write five
plain Python functions. minkgame opens a window, runs the frame loop and
calls your functions at the right moments.

## The frame loop

```python
from minkgame import runtime
from minkgame.vectors import Vec2

player = None


def init():
    """Called once, right after the window opens."""


def load():
    """Called once after init. Load textures, sounds and music here."""
    global player
    player = runtime.assets.texture("player.png")


def update():
    """Called every frame before drawing."""
    if runtime.input.key_down("ArrowRight"):
        print("moving right, frame took", runtime.time.delta(), "seconds")


def draw():
    """Called every frame to queue sprites."""
    runtime.draw.sprite(player, Vec2(0.0, 0.0))


def exit():
    """Called once when the window closes."""


runtime.run(init, load, update, draw, exit)
```

`run` opens a resizable window titled "Mink". It then creates the services a
game works with and publishes them as module attributes of
`minkgame.runtime`:

- `assets`: an `Assets` loader rooted at the `assets` directory
- `audio`: the `Audio` mixer
- `draw`: the `Draw` sprite batcher
- `input`: the `Input` state
- `stats`: a `Stats` object, which holds no statistics yet
- `time`: a `Time` object
- `window`: the `Window`

After that it calls `init` and then `load`.

Each frame does the following, in order:

1. Measures the seconds since the previous frame and stores the value in `time`.
2. Calls `update`.
3. Matches the render target to the window size.
4. Calls `draw`.
5. Clears the frame to a dark grey and renders the queued sprites.
6. Presents the frame.
7. Advances the input state, so that "pressed" and "released" checks cover exactly one frame.

When the window is closed, `run` calls `exit`, sets the published names back
to `None` and shuts pygame down.

`Runtime` is the object behind `run`. It has the methods `resume()`,
`handle_event(event)`, `frame()` and `shutdown()`, which you can use to drive
the loop yourself.

## Modules

| Module | Contents |
| --- | --- |
| `minkgame.vectors` | `Vec2`, a mutable 2D vector. It supports `+`, `-`, `*`, `/` and unary `-`, plus `length()` and `normalized()`. It has the constants `ZERO`, `ONE`, `UP`, `DOWN`, `LEFT` and `RIGHT`. |
| `minkgame.colors` | `Color` with the `rgb`, `rgba`, `hsv` and `hsva` constructors and `as_array()`. Named colours: `WHITE`, `BLACK`, `TRANSPARENT`, `RED`, `GREEN`, `BLUE`, `CYAN`, `MAGENTA`, `YELLOW`. |
| `minkgame.audiomath` | `linear_to_db` and `db_to_linear`. |
| `minkgame.matrices` | `Affine2`, a 2D affine transform with `translation`, `scale`, `rotation`, `inverse`, `transform_point` and `@` composition. 4×4 numpy matrix helpers: `model_matrix`, `rotation_z`, `look_to_lh`, `orthographic_lh`. |
| `minkgame.camera` | `Camera` with `position`, `rotation`, `zoom` and an optional fixed `size`. `project` maps a screen point to the world and `unproject` maps a world point to the screen. Also `build_matrix`. |
| `minkgame.input` | `Input` with `key_down`, `key_pressed`, `key_released`, `mouse_down`, `mouse_pressed`, `mouse_released`, `mouse_pos` and `scroll`. Also `key_code_name` and `mouse_button_name`. |
| `minkgame.timing` | `Time`. `delta()` gives the seconds the last frame took. |
| `minkgame.windowing` | `Window` with `title`/`set_title`, `size`/`set_size` and `resizable`/`set_resizable`. |
| `minkgame.sounds` | `Sound` and `Music`, plus the `Audio` player with a master `volume`. |
| `minkgame.assets` | `Assets`, which loads `texture`, `sound` and `music` files relative to its root. Also `Texture`. |
| `minkgame.draw` | `Draw` with `set_camera`, `sprite(texture, position, rotation, scale, tint)` and `submit(target)`. Also the batching classes `DrawInstance`, `DrawBatch` and `Batcher`. |
| `minkgame.video` | `VideoStack`, the off-screen render target. It is cleared, drawn into and blitted to the display each frame. |
| `minkgame.runtime` | `run`, `Runtime`, `Stats` and the published service names. |

## Examples

Vectors and colours:

```python
from minkgame.vectors import Vec2
from minkgame.colors import Color

velocity = Vec2(3.0, 4.0)
print(velocity.length())        # 5.0
print(velocity.normalized())    # [0.6, 0.8]
position = Vec2.ZERO + velocity * 0.5

orange = Color.hsv(30.0, 1.0, 1.0)
print(orange)                   # Color(1.00, 0.50, 0.00, 1.00)
```

Volume conversions:

```python
from minkgame.audiomath import linear_to_db, db_to_linear

linear_to_db(1.0)    # 0.0
linear_to_db(0.0)    # -inf
db_to_linear(-20.0)  # 0.1
```

Turning a mouse position into world coordinates:

```python
from minkgame.camera import Camera
from minkgame.vectors import Vec2

camera = Camera()
camera.zoom = 2.0
world = camera.project(Vec2(400.0, 300.0), Vec2(800.0, 600.0))    # [0, 0]
screen = camera.unproject(world, Vec2(800.0, 600.0))              # back to [400, 300]
```

Inside `draw()`, call `runtime.draw.set_camera(camera)` to draw through a
camera. Call `runtime.draw.set_camera(None)` to return to the default camera.

## Drawing

With the default camera, the world origin is the centre of the window and
`y` points up. A sprite is centred on its position. At zoom 1 it is the
texture's size in pixels, multiplied by `scale`. Its colour channels are
multiplied by `tint`.

Sprites that share a texture are batched. A batch left unused for ten frames
is dropped.

## Audio

Creating `Audio` initialises the pygame mixer, and the runtime creates it
before `load` runs. If you use the loaders outside `run`, create an `Audio`
before you load sounds or music.

- `Sound` has `volume` and `speed`.
- `Music` has `volume`, `speed`, `loop` and `paused`.

Volumes are linear gains, clamped to 0–1 when handed to the mixer. Speed is
applied by resampling when playback starts. Pausing only has an effect while
the track is playing. For `Music`, `speed` and `loop` take effect the next
time you pass it to `audio.play`.

## Input names

Keys use physical-key names, for example:

- letters and digits: `"KeyW"`, `"Digit1"`
- navigation and editing: `"Space"`, `"Enter"`, `"Escape"`, `"ArrowLeft"`
- modifiers: `"ShiftLeft"`
- function and keypad keys: `"F1"`, `"Numpad5"`

Keys without a name are ignored.

Mouse buttons are `"Left"`, `"Middle"`, `"Right"`, `"Back"` and `"Forward"`.
Any other button is `"Other(n)"`.

Wheel motion is reported by `scroll()` and is reset every frame.

## What it does not do

- Rendering is done in software with numpy onto a pygame surface. There is no GPU pipeline, so many large sprites will be slow.
- `Stats` carries no statistics.
- There is no command-line program; a game is a Python script that calls `run`.

## Requirements

Python 3.10 or later, with pygame and numpy. To run the tests, install the
`test` extra, which adds pytest.