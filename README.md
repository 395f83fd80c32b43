# vexengine

A small layered 2D rendering engine. An application owns a window and a
stack of layers; each frame every layer is updated with the elapsed
`Timestep`, and events travel from the topmost overlay down until one of
them is marked as handled.

## What it offers

- **Events** (`vexengine.events`): window, keyboard and mouse event
  dataclasses with an `EventType`, `EventCategory` flags and
  `is_in_category()`, plus an `EventDispatcher` whose `dispatch(event_class,
  func)` calls `func` when the event is of that class and ORs its return
  value into `event.handled`.
- **Layers** (`vexengine.layers`): `Layer` with `on_attach`, `on_detach`,
  `on_update`, `on_imgui_render` and `on_event` hooks, and `LayerStack`,
  where layers pushed with `push_layer` always stay below overlays pushed
  with `push_overlay`.
- **Time and input** (`vexengine.timestep`, `vexengine.input`,
  `vexengine.keycodes`): `Timestep` with `seconds` and `milliseconds`
  properties; polling functions `is_key_pressed`, `is_mouse_button_pressed`
  and `get_mouse_position` over a replaceable `InputBackend`; `Key` and
  `MouseButton` code enums.
- **Geometry** (`vexengine.buffer`, `vexengine.vertex_array`):
  `BufferLayout` computes offsets and stride from `(ShaderDataType, name)`
  pairs; `VertexBuffer`, `IndexBuffer` and `VertexArray` keep their data in
  memory and upload it to OpenGL on first `bind()`.
- **Textures** (`vexengine.texture`): `Texture2D` loads an image with
  Pillow, accepts only 3- or 4-channel images, and uploads with nearest
  filtering on first `bind(slot)`.
- **Camera** (`vexengine.camera`, `vexengine.camera_controller`):
  `OrthographicCamera` with `position`, `rotation` (degrees about Z) and
  projection, view and view-projection matrices as NumPy arrays;
  `OrthographicCameraController` pans with W/A/S/D, rotates with Q/E, zooms
  on mouse scroll (never below 0.25) and follows window resizes.
- **Rendering** (`vexengine.renderer_api`, `vexengine.renderer`):
  `RenderCommand` forwards clear and draw calls to the active `RendererAPI`
  back-end (`RenderCommand.use()` swaps it); `renderer.begin_scene(camera)`,
  `renderer.submit(shader, vertex_array, transform)` and
  `renderer.end_scene()`, which returns how many draws were submitted.
- **Window and application** (`vexengine.window`, `vexengine.application`):
  a pyglet-backed `Window` that turns native input into engine events and
  feeds the input polling functions, and `Application`, which runs the frame
  loop until the window is closed.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Writing an application

```python
from vexengine.application import Application, run_application
from vexengine.events import EventDispatcher, KeyPressedEvent
from vexengine.layers import Layer


class HelloLayer(Layer):
    def __init__(self):
        super().__init__("Hello")

    def on_update(self, ts):
        print(f"frame took {ts.milliseconds:.2f} ms")

    def on_event(self, event):
        EventDispatcher(event).dispatch(
            KeyPressedEvent, lambda e: print(e) or False
        )


class HelloApp(Application):
    def __init__(self):
        super().__init__()
        self.push_layer(HelloLayer())


run_application(HelloApp)
```

`run_application` sets up the `VEX` and `APP` loggers, builds the
application, runs it and closes it. Layers pushed with `push_layer` are
updated first and receive events last; overlays pushed with `push_overlay`
sit on top, receive events first and can stop an event by returning `True`
from a dispatched handler.

## What it does not do

- It has no shader support of its own: nothing here compiles, links or
  loads shader programs. `renderer.submit` takes any object with `bind()`
  and `upload_uniform_mat4(name, matrix)` methods, so the application has
  to supply its shader type.
- It installs no command and ships no demo program or assets.
- `Layer.on_imgui_render` is called every frame, but no debug UI is drawn.