# msdf

A library for SDF files, the self-describing binary format that
particle-in-cell plasma simulation codes write.

msdf can:

- read the file header of an SDF file;
- map the integer block type and data type codes in SDF files to readable names;
- build angular distributions and integrated distribution functions from
  particle records, with one histogram per species, and write them as plain
  text that gnuplot can read;
- write grids and point meshes as text columns and add value ranges to a
  meta data file.

## Installation

msdf needs Python 3.10 or later and numpy. To run the tests, install the
`test` extra, which adds pytest.

## Reading an SDF header

```python
from msdf.sdfheader import read_file_header

with open("run0001.sdf", "rb") as stream:
    header = read_file_header(stream)

print(header.code_name, header.num_blocks, header.first_block_location)
```

`read_file_header` reads from the current position of a binary stream and
returns a frozen `FileHeader` dataclass. Values are read as little-endian. If
the stream ends too early, it raises `EOFError`.

The building blocks of the header reader are in `msdf.binaryio`:

- `read_value(stream, fmt)` reads one value described by a `struct` format.
  It uses little-endian unless the format gives a byte order.
- `read_string(stream, length)` reads a fixed-length string. It cuts the
  string at the first NUL and strips whitespace. The length must be below 1024.

## Block and data types

```python
from msdf.sdfio import block_type_from_int, block_type_name, data_type_from_int, data_type_name

block_type_name(block_type_from_int(3))   # "plain_variable"
data_type_name(data_type_from_int(4))     # "real8"
```

A code that the format does not define maps to `BlockType.OTHER` or
`DataType.OTHER`. `GeometryType` lists the mesh geometries.

## Particle distributions

Both analyses take an iterable of `msdf.particles.Particle` records. Each
record holds a species id, a weight, `px`, `py`, `pz`, and optionally `x` and
`y`. Species ids start at 1. Records with an id below 1 are counted in
`small_id_count` and are not binned.

### Angular distribution

`msdf.angular.angular_distribution(particles, AngularOptions(...))` bins each
particle by the angle between two chosen axes (`x`, `y`, `px`, `py` or `pz`).

- Momenta are in SI units.
- Particles can be limited by gamma and by a region in x and y.
- With `stretch=True`, each weight is scaled by the length of the
  (axis 1, axis 2) vector.

The `AngularDistribution` it returns has these methods:

- `rows(index)` yields `(x, y, angle, r)` for each species.
- `write(output_name)` writes one file per species.

### Distribution function

`msdf.distfunc.distribution_function(particles, DistFuncOptions(...))` bins
particles by one `Quantity` between `dmin` and `dmax`. In each bin it adds up
a weighted moment. The quantities are `x`, `y`, `px`, `py`, `pz`, `E`, `Ex`,
`Ey`, `Ez`, `v`, `vx`, `vy`, `vz`, `theta`, `theta2`, `pxt`, `pyt`, `pzt`,
and `1` for the moment.

- Momenta are normalised to `m c`.
- With `east=True`, only particles with positive `px` are kept.
- With `lfactor`, particles below `min_gamma` are kept, with their weight
  scaled by that factor.

The `DistributionFunction` it returns has `rows(index)`, `write(output_name)`,
and the range of `px` it has seen (`px_min`, `px_max`).

### Output file names

Output names can contain a `#`, which is replaced by the species index. If
there is no `#`, the index is added at the end of the name:

```python
from msdf.particles import output_file_name

output_file_name("phaseplot#.dat", 0)   # "phaseplot0.dat"
output_file_name("distfunc.dat", 2)     # "distfunc.dat2"
```

## Grid text helpers

`msdf.gridtext` has these functions:

- `grid_text_lines` and `write_grid_text` turn 1, 2 or 3 dimensional numpy
  arrays into index/value columns. Each block of the first index ends with a
  blank line.
- `point_mesh_text_lines` and `write_point_mesh_text` do the same for point
  mesh coordinates.
- `append_meta` adds a line to a meta data file.

```python
from msdf.gridtext import default_output_name, split_block_names

default_output_name("data.sdf")    # "data.h5"
split_block_names("ex,ey,ez")      # ["ex", "ey", "ez"]
```

## Commands

`msdf.commands.register_commands()` returns the names and descriptions of the
known analysis commands. `format_help(commands)` returns the general usage
text for them. These are data only: the package installs no command-line
program.

## What msdf does not do

- It reads only the file header. It does not read block headers or block
  data, so it cannot list the blocks of a file or load grids and particles
  from one. You supply particles as `Particle` records and grids as numpy
  arrays.
- It writes no HDF5 output. `default_output_name` only builds the `.h5` file
  name.
- It has no command-line tool.

## Errors

Errors are raised as subclasses of `msdf.errors.MsdfError`:

- `BlockNotFoundError`
- `BlockTypeUnsupportedError`
- `DataTypeUnsupportedError`

Invalid analysis settings, such as a `dim` below 1 or equal `dmin` and `dmax`,
raise `ValueError`.