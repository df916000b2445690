# bubblepopper

A small arcade game. Mr Popper walks along the ground. When a bubble rises
through him he is trapped inside it and carried upwards towards three stars.
Touching a star scores a point, pops the bubble and lets him fall back down.
Birds patrol left and right around the stars: touching one brings every star
back and sets the score to zero. Collect all three stars and the game ends
with "Game Over" on the screen.

## Installing

```
pip install .
```

This needs Python 3.10 or later and pygame.

## Playing

```
bubblepopper
```

Options:

| Option        | Effect                                              |
|---------------|-----------------------------------------------------|
| `--seed N`    | Seed the random generator, so bubbles repeat        |
| `--mute`      | Play no sounds                                      |

Controls:

| Key         | Action                                  |
|-------------|-----------------------------------------|
| Left/Right  | Walk left or right                      |
| Space       | Pop the bubble you are trapped in       |
| H           | Show the help menu                      |
| B           | Hide the help menu                      |
| Esc         | Quit                                    |

Closing the window also quits.

The game looks for its pictures, sounds and font in an `assets` directory
under the current working directory (`background.png`, `mrpopper1.png`,
`mrpopper2.png`, `enemy1.png`, `star.png`, `pop.wav`, `collide.wav` and
`bubbles.ttf`). If a file is missing the game keeps running: shapes are drawn
in plain colour, the sound is left out, and without the font no text is drawn.

## Using the pieces

The modules can be used on their own:

- `bubblepopper.box.Box`: a centred rectangle with `intersect`,
  `intersect_down` and `intersect_sideways`.
- `bubblepopper.timer.Timer` and `TimerType`: a timer whose `float()` value
  is the elapsed time normalised to its period, once, looping or ping-pong.
  It takes an optional `clock` returning milliseconds.
- `bubblepopper.keys.Scancode` and `key_for_pygame`: keyboard scan codes.
- `bubblepopper.render.Renderer`, `Brush`, `ScaleMode` and
  `compute_viewport`: drawing of rectangles, lines, disks, sectors and text
  in canvas units onto a pygame surface, and sound and music playback.
- `bubblepopper.graphics.Graphics`: the window, the event loop, keyboard
  and mouse state and the clock.

```python
from bubblepopper.box import Box
from bubblepopper.timer import Timer, TimerType

a = Box(0, 0, 10, 10)
b = Box(5, 5, 10, 10)
assert a.intersect(b)

timer = Timer(2.0, TimerType.LOOPING)
timer.start()
progress = float(timer)  # position in the period, 0.0 to 1.0
```

The game rules live in `bubblepopper.game.GameState` and the objects in
`bubblepopper.objects`. They take a `graphics` object and call only its
`get_global_time`, `get_key_state`, `draw_rect`, `draw_disk`, `draw_text`
and `play_sound`, so any object with those methods can drive them without a
window. `bubblepopper.main.build_game(graphics, seed)` opens the window on a
`Graphics`, sets it up and returns a started `GameState`.

## What it does not do

There is one level and no restart: once the game is over the window stays
open until it is closed. Scores are not kept between runs.

## Running the tests

```
pip install .[test]
pytest
```