# wanderer

A small top-down 2D game built on pygame. It opens on a menu with two buttons,
**Start Game** and **Exit**. Starting the game shows a scene with an animated
character, three red diamond-shaped obstacles and a yellow square tile. The
character cannot walk through the red obstacles; the yellow tile is only drawn.

## Installing

```
pip install .
```

`pygame` is installed with it.

## Running

```
wanderer
```

The command takes no options besides `--help`. It opens a resizable 800 × 600
window titled "Game" and runs until the window is closed or **Exit** is clicked.

Assets are looked up relative to the working directory:

- `res/fonts/arial.ttf` — the font for the menu buttons. If it cannot be loaded,
  `GameMenu: Failed load font.` is printed to standard error and pygame's default
  font is used instead.
- `res/assets/player/player.png` — the player's sprite sheet, 4 columns by 8 rows
  (rows 0–3: walking down, up, left, right; rows 4–7: the same while running). If
  it cannot be loaded, `Failed to load Player`s texture.` is printed to standard
  error and the player is not drawn.

## Controls

| Input                 | Action                                              |
|-----------------------|-----------------------------------------------------|
| `W` `A` `S` `D`       | walk up, left, down, right (diagonals allowed)      |
| `Shift` held          | run: 1.5× speed and a quicker animation             |
| `Esc`                 | switch between the menu and the game                |
| `F`                   | make the camera follow the player again             |
| Middle mouse drag     | pan the camera; it stops following the player       |
| Left click on button  | press a menu button (acts on release)               |

When the game starts the camera glides after the player until it is dragged.

## Using the pieces

The modules can be used on their own:

- `wanderer.geometry` — `Point`, `Size`, `Rect`, the `Align` flags and `distance`.
  `Rect.point_by(align)` gives the point of a rectangle named by the flags.
- `wanderer.events` — the event classes (`KeyPressEvent`, `KeyReleaseEvent`,
  `MousePressEvent`, `MouseReleaseEvent`, `MouseMoveEvent`), the `Key`, `Mode`
  and `Button` enums, and `EventHandler`. `EventHandler.handle_event` calls the
  hook method for the event's type, then passes the event to every child added
  with `add_event_handler`. The default hooks call listeners registered with
  `subscribe`.
- `wanderer.shapes` — `RectangleShape` and `Transform`: a rectangle with
  position, origin, rotation and scale, and its world bounds and corners.
- `wanderer.animation` — `Animation`, which steps through the columns of one row
  of a sprite sheet.
- `wanderer.items`, `wanderer.rectangles`, `wanderer.player`,
  `wanderer.textbutton` — the scene and menu items. `CollisionItem` gives a
  convex polygon's edge normals (`axes`) and projections (`projection_on`);
  `Player.handle_collision` pushes the player out of an item along the axis of
  least overlap.
- `wanderer.visitors` — `SortItemsVisitor` files items into an `ItemContext`.
- `wanderer.scene` — `Scene` updates and draws its items each `render`, then
  hands every collision handler the collision items whose centres are closer
  than 200 units.
- `wanderer.layout`, `wanderer.menu` — `VerticalLayout` stacks items in a column
  by alignment and spacing; `Menu` draws them.
- `wanderer.views` — `MenuView` (fixed) and `SceneView` (follows a target, can be
  dragged).
- `wanderer.app` — `MainWindow`, which turns pygame events into the game's
  events and draws everything, and `main`.

Menus, scenes and views draw through a render target object; `MainWindow` is the
one the game uses.

## What it does not do

The package ships no assets: the font and the sprite sheet have to be supplied
under `res/` as described above. There is no sound, no saving and no levels
beyond the single fixed scene.

## Tests

```
pip install ".[test]"
pytest
```