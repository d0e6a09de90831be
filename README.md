# spacegame

A small arcade game built on pygame. You fly a vector-drawn spaceship around the window. It leaves a trail of thruster particles and plays an engine sound. The game runs on a small scene graph: nodes hold child nodes and components. The components draw vector shapes, emit particles, play sounds, or let you edit a shape in place.

## Installing

```
pip install .
```

To install with the test tools:

```
pip install ".[test]"
```

## Playing

```
spacegame
```

The command opens a 640×480 window titled "Space" and caps the frame rate at 60 frames per second. It takes no options apart from `--help`. The frame rate, averaged over the last 16 frames, is shown in the top-left corner.

Controls:

| Key     | Action                           |
|---------|----------------------------------|
| A / D   | Rotate the ship                  |
| Space   | Fire the thruster                |
| E       | Explode the ship                 |
| F3      | Toggle the debug overlay         |
| F11     | Toggle fullscreen                |
| F1 / F2 | Editor: off / vector edit mode   |

When the ship explodes it disappears and stops responding to input.

In vector edit mode, the editor works on the shape of the scene root:
- A right click selects the nearest point within 10 pixels, or clears the selection if none is that close.
- A left click adds a point at the mouse. If a point is selected, the new point goes in right after it.
- The arrow keys nudge the selected point by one pixel per frame.
- Delete removes the selected point.

The debug overlay shows:
- each node's position and name
- the number of fonts loaded

### Assets

Both asset paths are relative to the working directory:
- font: `data/FONT/Roboto-Regular.ttf`
- thruster sound: `data/SOUND/thruster_loop.wav`

These files are not part of the package. If a file is missing, the game logs a warning and runs on without that asset. With no font there is no text on screen. With no sound file the ship is silent.

## Using the engine pieces

```python
from spacegame.node import Node
from spacegame.datatypes import Vector2
from spacegame.vector_renderer import VectorRendererComponent

ship = Node("Ship")
shape = ship.add_component(VectorRendererComponent)
shape.points = [Vector2(-1.0, 1.0), Vector2(0.0, -1.0), Vector2(1.0, 1.0)]
shape.scale = 10.0

ship.position = Vector2(300.0, 300.0)
ship.update_transform_recursive(Vector2(0.0, 0.0), 0.0)
print(shape.world_points())
```

### Data types and timing

- `spacegame.datatypes`: `Vector2` and `Color4`.
  - `Vector2` is an immutable 2D vector with `rotate_around`, `magnitude`, `normalize`, `distance_from`, `lerp` and `from_angle`.
  - `Color4` is an RGBA colour whose channels are checked to be within 0–255.
- `spacegame.profiler`:
  - `Timer` measures the seconds since it was created or last reset, and accepts a custom clock.
  - `Sampler` keeps a fixed window of samples and reports `max`, `min` and `average`.
- `spacegame.inputstate`: `InputState`, a snapshot of the held keys and the mouse. Key names are case-insensitive strings such as `"space"` or `"f1"`.

### Scene graph

- `spacegame.node`: `Node`.
  - Its members are `add_child`, `find_first_child`, `add_component`, `get_component`, `get_or_add_component`, `detach_component`, `get_root`, `get_children`, `get_descendants`, `update`, `draw` and `update_transform_recursive`.
  - A node holds at most one component of each type.
- `spacegame.component`: `Component`, the base class with the hooks `on_attached`, `on_detached`, `on_update` and `on_draw`.
- `spacegame.camera`: `Camera`, a node whose global position becomes the renderer's view origin.
- `spacegame.scene_root`: `SceneRoot`, `PhysicsWorld` and `Body`.
  - Each `SceneRoot` owns a `PhysicsWorld` with a gravity of (0, -10).
  - At most 128 scene roots may be open at once.
  - Release a scene root with `close()` or by using it as a context manager.

### Components

- `spacegame.vector_renderer`: `VectorRendererComponent` draws its points as an open polyline.
- `spacegame.particle_emitter`: `ParticleEmitterComponent` and `Particle`. The component emits point particles at `emission_rate` per second and drops each one after `lifetime` seconds.
- `spacegame.sound_player`: `SoundPlayerComponent` plays `wav_path` through `pygame.mixer`.
- `spacegame.rigid_body`: `RigidBodyComponent` creates a body in the scene root's physics world.
- `spacegame.editor`: `EditorComponent` and `EditMode`, the in-game shape editor described above.

### Game

- `spacegame.spaceship`: `Spaceship`, the player's ship.
- `spacegame.renderer`: `Renderer`, `CachedFont` and `EngineFont`.
  - The renderer draws lines, points, circles and text onto a pygame surface, in camera space.
  - A font path of `None` in `font_files` selects pygame's built-in font.
- `spacegame.registry`: `Registry` and `RegistryEntry`. Each engine class gets a serialization id, handed out in registration order.
- `spacegame.game`: `Game` and `main`, the window and the frame loop.

## What it does not do

- Shapes edited in vector edit mode are not saved. They are gone when the game closes. The registry hands out serialization ids, but nothing reads or writes a saved scene.
- The physics world only applies gravity to its bodies. It does not detect collisions, and its bodies do not move the nodes they belong to.
- There are no enemies, no scoring and no levels: the ship flies about until it explodes.