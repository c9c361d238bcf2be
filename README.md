# gameframe

A small library with no dependencies that holds the math and support code a game
framework needs.

## Modules

- `gameframe.helpers`: `fequal` and `fnotequal` compare floats within a
  tolerance, which defaults to `FEQUAL_EPSILON = 0.00001`. The module also has
  `degrees_to_rads`, `rads_to_degrees`, `clamp`, `increase_if_bigger`,
  `decrease_if_lower` and `is_power_of_two`.
- `gameframe.vector`: the float vectors `Vec2`, `Vec3` and `Vec4`.
  - They support component-wise `+ - * /` with vectors of the same type or with scalars, in both orders, and the in-place forms of those operators.
  - They support indexing, iteration, `length`, `length_squared`, `distance_from`, `dot`, `normalized` (which returns a copy) and `normalize` (which works in place), plus the `with_x`/`with_y`/… helpers.
  - `Vec3` adds `cross`, `saturate`, `xy` and `xz`.
  - `==` uses the tolerance from `helpers`, so vectors cannot be hashed.
- `gameframe.ivector`: the integer vectors `IVec2`, `IVec3` and `IVec4`.
  - Division between integers rounds toward zero.
  - Mixing in a float scalar or a float vector gives a float vector as the result.
  - `IVec2` has `from_vec2` and `clamp_x`/`clamp_y`/`clamp_xy`.
  - The module also has `Rect`, a dataclass with the fields `x`, `y`, `w` and `h`.
- `gameframe.color`: `Color4f`, an RGBA colour whose channels run from 0 to 1.
  - A new colour is white by default.
  - `Color4f.from_bytes(r, g, b, a)` builds a colour from 0–255 values.
  - Named presets include `red()`, `orange()` and `cornflower_blue()`.
- `gameframe.matrix`: `Mat4`, a 4×4 matrix stored column-major.
  - Element `mCR` is column `C`, row `R`, and the translation sits in `m41..m43`.
  - Calling `Mat4()` with no arguments gives the identity.
  - It provides `scale`, `rotate` (degrees about an axis), `translate`, `translate_pre_rot_scale`, `create_scale`, `create_rotation`, `create_translation`, `create_srt`, `set_axes_view`/`set_axes_world`, `transpose`, `euler_angles`, `scale_factors`, `translation`, `up`, `right` and `at`.
  - Multiplying with `*` works with another `Mat4`, a scalar, a `Vec4`, or a `Vec3`/`Vec2`. A `Vec3` or `Vec2` is divided by w when w is non-zero.
  - `invert()` raises `ValueError` when the matrix is singular. `inverted()` returns an unchanged copy in that case.
- `gameframe.projection`: these functions return a `Mat4`.
  - `frustum`, `perspective_vfov`, `perspective_hfov` and `ortho` build left-handed projections, with the camera looking down +z. They raise `ValueError` on degenerate bounds.
  - `look_at_view` and `look_at_world` build look-at matrices.
- `gameframe.random`: `Pcg32` is the PCG XSH-RR generator, with `seed`, `next_uint32` and an unbiased `bounded`.
  - `Generator(seed=None)` gives `randint(low, high)` and `uniform(low, high)`. Both bounds are inclusive, and called with one argument the range is `[0, low]`.
  - A generator built without a seed is seeded from the system's secure random source.
  - The module-level functions `set_seed`, `randint` and `uniform` use a shared generator.
- `gameframe.resources`: `ResourceManager` files `Resource` subclasses by their `category` class attribute and by name.
  - `get(kind, name)` raises `KeyError` when the resource is missing.
  - `resource_lists()` returns each category mapped to its sorted names.
- `gameframe.utility`: this module has the following functions.
  - `output_message` formats printf-style, writes to stderr and returns the text, cut to 1023 characters.
  - `load_complete_file` returns a file's bytes.
  - `system_time` and `system_time_since_start` give monotonic seconds.
  - `files_in_folder(path, extension)` returns the sorted names that contain `extension`.

## Example

```python
from gameframe.matrix import Mat4
from gameframe.vector import Vec3
from gameframe.random import Generator

m = Mat4()
m.create_srt(Vec3(2, 2, 2), Vec3(0, 90, 0), Vec3(1, 2, 3))
print(m.translation())      # Vec3(x=1.0, y=2.0, z=3.0)
print(m.scale_factors())    # about Vec3(x=2.0, y=2.0, z=2.0)

rng = Generator(42)
print(rng.randint(1, 6))    # the same value on every run for this seed
```

## What it does not do

The package only works out numbers and keeps track of objects. It has none of the following:

- no window
- no renderer
- no shader, texture or mesh loading
- no physics engine
- no event system
- no command-line program

A `Resource` holds only what you put into it.

## Install and test

```
pip install .[test]
pytest
```