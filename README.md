# scenekit

Building blocks for a small real-time 3D scene, written with numpy and free
of any windowing or GPU dependency. It does the maths and the bookkeeping.
Drawing is up to whichever renderer you use.

## What is inside

- `scenekit.transformations`: `Identity`, `Matrix`, `Rotation`, `Scale`,
  `Translation` and `TransformationComposite`, each with a `matrix()` method
  that returns a 4×4 numpy array. A composite applies its entries in order,
  and you can add entries with `add_back` or `add_front`. `simplify()`
  collapses the chain into one `Matrix`. The module also has the helpers
  `rotation_matrix`, `rotate_vector`, `look_at` and `perspective`.
- `scenekit.bezier`: `BezierCurve.evaluate(control_points, t)` returns the
  point at `t` on a cubic Bézier curve with four control points.
- `scenekit.camera`: `Camera` is a fly-through camera driven by yaw and pitch
  in degrees. It has these methods:
  - `process_keyboard` moves the camera in a `CameraMovement` direction.
  - `process_mouse_movement` turns it, with pitch clamped to ±89°.
  - `process_mouse_scroll` zooms, with the field of view clamped to 1–45°.
  - `update_aspect_ratio` and `set_planes` change the projection settings.
  - `view_matrix()` and `projection_matrix()` return the matrices.
- `scenekit.mesh`: `Mesh`, `Vertex` and `MeshType`. A mesh holds positions
  only (`BASIC`), positions and normals (`NORMAL`), or positions, normals and
  texture coordinates (`UV`). You can:
  - build one from flat data with `Mesh.from_array`;
  - use the ready-made shapes `Mesh.triangle`, `Mesh.square` and
    `Mesh.circle`;
  - compute vertex normals with `calculate_normals()`;
  - get the vertex data as a float32 array of shape (n, 8) from
    `interleaved()`.
- `scenekit.materials`: `ColorMaterial` and `TextureMaterial`. `bind(shader)`
  sets their uniforms through the shader's `set_bool`, `set_int`, `set_float`
  and `set_vec4` methods. A texture passed to `TextureMaterial` needs
  `bind(unit)` and `cleanup()` methods.
- `scenekit.model`: `Model` holds meshes, a position, rotation (radians) and
  scale, a transformation chain, a material and a shader.
  - `model_matrix()` is the matrix of the whole chain.
  - `basic_model_matrix()` uses only position, rotation and scale.
  - Setting the position, rotation or scale rebuilds the chain. This drops any
    transformations added with `add_transformation`.
  - `bind_material(shader)` uploads the material and calls
    `shader.set_mat4("model", ...)`.
  - `Model.create_triangle`, `create_square` and `create_circle` build models
    from the mesh shapes.
- `scenekit.shapes`: the vertex data `CUBE` (36 positions) and `PLAIN` (a
  ground square with normals and texture coordinates), and the factories
  `cube_model` and `plain_model`.
- `scenekit.controls`: `Controls.process_input(pressed_keys, delta_time)`
  moves a camera for the held `Key`s (W, A, S, D, Space, Left Shift). It
  returns `True` when Escape is held. `MouseLook` turns the camera from
  cursor positions, zooms it from scroll offsets and updates its aspect ratio
  on resize.
- `scenekit.scenes`:
  - `BezierMotion` moves a model along a curve and back, turning it to face
    its direction.
  - `RotationMotion` spins a model about Z.
  - `SkyboxView` holds a large cube. Its view matrix has the translation
    removed while inside, and Q toggles between inside and outside.
  - `TriangleCanvas` places triangles at screen positions and removes them by
    their 1-based stencil id.
  - `screen_to_world` unprojects a window position into world space.

## Example

```python
from scenekit.camera import Camera, CameraMovement
from scenekit.model import Model
from scenekit.mesh import MeshType

camera = Camera()
camera.update_aspect_ratio(800, 600)
camera.process_keyboard(CameraMovement.FORWARD, 0.016)

square = Model.create_square(MeshType.UV)
square.set_position(0.5, 0.2, 0.0)
square.set_rotation(0.0, 0.0, 0.785)
square.set_scale(1.5, 1.0, 1.0)

mvp = camera.projection_matrix() @ camera.view_matrix() @ square.model_matrix()
vertex_data = square.get_mesh(0).interleaved()
```

## What it does not do

scenekit does not open windows or run an event loop. It does not compile
shaders, load images or textures, load model files, or upload buffers to a
GPU. Shaders and textures are whatever objects you pass in that have the
methods listed above. Input handlers take key codes and cursor positions
that you collect from your own windowing library.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```