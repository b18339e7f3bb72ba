# starfield

Data handling and geometry behind an interactive 3D star map: reading the
HYG star catalogue, converting between galactic and equatorial
coordinates, building sky meshes and grids, loading constellation lines
and labels, and driving an orbiting camera with a screensaver mode.

The package has no third-party dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library overview

- `starfield.conversions`: colour decoding (`to_color`, `to_color_a`,
  returning `Color` and `ColorA`), parsing of the leading number of a
  string (`to_int`, `to_float`, `to_double`, raising `ValueError` when
  there is none), `wrap`, `lerp`, `clamp`, `equatorial_to_cartesian`, and
  `merge_names`, which rewrites a HYG catalogue file in place with proper
  star names taken from a star-names list keyed by HR number.
- `starfield.stars`: `Stars` loads the semicolon-separated HYG catalogue
  into vertices, (absolute magnitude, distance) pairs and colours, colours
  each star from its B-V index (`star_color`), and reads and writes a
  compact binary cache. `Star` holds a single star's direction, distance,
  magnitude and colour.
- `starfield.background`: `create_sphere` builds a textured sphere mesh
  (`SphereMesh`) as one triangle strip; `to_equatorial` and `to_galactic`
  convert coordinates in radians; `Background` fades with camera distance.
- `starfield.cam`: `Cam`, the orbiting camera with inertia after a drag,
  latitude limits, a field of view limited to 1..179 degrees and an
  automatic tour after a period without mouse input. A clock function can
  be passed in for deterministic use.
- `starfield.labels`: `Labels` and `ConstellationLabels`, star and
  constellation names (`Label`) placed in space, loaded from text files
  and read from and written to a binary format.
- `starfield.grid`: `build_grid_vertices` and `Grid`, the celestial grid
  as pairs of line vertices.
- `starfield.constellations`: `Constellations`, constellation line
  segments loaded from text (looking up missing star distances in a HYG
  file and writing the completed data as `constellations.cln`), with
  binary read and write; `star_coordinate` and `star_coordinates`.
- `starfield.constellation_art`: `ConstellationArt`, the small art sphere
  and its fading.
- `starfield.user_interface`: `UserInterface` keeps the camera distance in
  lightyears and formats it with `caption()`.

Example:

```python
from starfield.background import to_galactic
from starfield.stars import Stars

stars = Stars()
stars.load("hygxyz.csv")
with open("stars.cdb", "wb") as stream:
    stars.write(stream)

longitude, latitude = to_galactic(4.6498, -0.5050)
```

## What the package does not do

It draws nothing: there is no window, no rendering and no sound. It also
has no command-line program and no network client. It provides the data,
geometry, fading and camera state that such a viewer would use.