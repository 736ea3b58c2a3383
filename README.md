# ewrender

Building blocks for a small real-time 3D renderer. They are written with numpy
and do not depend on any graphics API.

- `ewrender.mesh` holds the vertex and index data that mesh generators produce.
  It has three types. `Vertex` holds a position, a normal and a uv. `MeshData`
  holds the vertices and indices, and has `vertex_count()`, `index_count()`,
  `positions()` and `triangles()`. `DrawMode` is either `TRIANGLES` or `POINTS`.
- `ewrender.procgen` has `create_cube`, `create_plane`, `create_sphere` and
  `create_cylinder`. The plane, sphere and cylinder raise `ValueError` when
  `subdivisions` is less than 1.
- `ewrender.transform` has `Transform`. It holds a position, a rotation and a
  scale, where the rotation is a `(w, x, y, z)` quaternion. `model_matrix()`
  builds the model matrix and `rotate(angle, axis)` turns the transform in its
  local frame. The module also has `quaternion_from_axis_angle`,
  `quaternion_multiply` and `quaternion_to_matrix`.
- `ewrender.camera` has `Camera`, with `view_matrix()` and `projection_matrix()`.
  The projection is perspective, or orthographic when `orthographic` is set.
  The module also has the helpers `look_at`, `perspective` and `orthographic`.
- `ewrender.camera_controller` has `CameraController`, a free-fly camera
  controller.
  - Each frame, `move(state, camera, delta_time)` takes an `InputState`, which
    records the right mouse button, the cursor position and the `Key`s held
    down.
  - While the right button is held, the mouse changes yaw and pitch. Pitch is
    clamped to ±89°.
  - W/S move the camera forward and back, D/A move it right and left, and E/Q
    move it up and down. Left shift sprints.
  - `move` returns the `CursorMode` the window should apply.
- `ewrender.shader`: `load_shader_source(path)` reads a shader file, and
  `ShaderSource.from_files(vertex_path, fragment_path)` reads a vertex and
  fragment pair. A file that cannot be read raises `ShaderSourceError`.
- `ewrender.texture` has two parts:
  - `texture_format(num_components)` maps a channel count to a
    `TextureFormat`. Unknown counts give `RGBA`.
  - `TextureOptions` describes wrap mode, filters, mipmapping, vertical flip
    and border colour. It checks its values when created.
- `ewrender.scene` describes the bloom demo scene.
  - `Scene.default(width, height)` lays the scene out.
  - `advance(delta_time)` spins the model about Y.
  - `lit_uniforms()` returns the lit-shader uniform values by name.
  - `resize(width, height)` records a new framebuffer size.
  - `Material`, `DirLight` and `PointLight` hold the lighting parameters.
  - `RenderSettings` holds gamma, exposure, the blur pass count and the debug
    views. `clamped()` returns a copy with each value held to its allowed
    range, and `post_process_inputs()` picks the textures for the final pass.
  - `ping_pong_passes(amount)` lists the blur passes.
  - `reset_camera(camera, controller)` puts the camera back at its home
    position.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from ewrender.procgen import create_cube, create_sphere
from ewrender.camera import Camera
from ewrender.transform import Transform

cube = create_cube(1.0)
print(cube.vertex_count(), cube.index_count())   # 24 36

sphere = create_sphere(1.0, 16)
triangles = sphere.triangles()                    # (n, 3) index array

camera = Camera()
view_projection = camera.projection_matrix() @ camera.view_matrix()

transform = Transform()
transform.rotate(0.5, (0.0, 1.0, 0.0))
model = transform.model_matrix()
```

A scene steps forward one frame at a time. It then gives the uniform values
for its lit pass:

```python
from ewrender.scene import Scene

scene = Scene.default(1080, 720)
scene.advance(1 / 60)
uniforms = scene.lit_uniforms()
screen, bloom = scene.settings.post_process_inputs()
```

All matrices are 4x4 numpy arrays in the column-vector convention, so they
compose with `@`, as in `projection @ view @ model`.

## What it does not do

The package computes geometry, matrices and scene state only. It does not:

- open a window or read input devices. You build `InputState` yourself.
- talk to a GPU. Nothing here compiles shaders, uploads buffers or textures,
  or draws.
- decode image files or load model files.
- provide a command to run the scene.