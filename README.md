# dxfdraw

`dxfdraw` reads and writes DXF drawings in ASCII form. DXF is the Drawing
Exchange Format used by CAD programs. You can build a drawing in code, with
layers, line types and text styles and with points, lines, circles, arcs,
polylines, 3D faces and text, and then save it. You can also load an existing
DXF file and inspect its entities, layers and header values.

## Installation

```
pip install dxfdraw
```

Only the standard library is used. Python 3.10 or newer is required.

## Creating a drawing

```python
from dxfdraw.reader import new_drawing

d = new_drawing()
d.point(0.0, 0.0, 0.0)
d.line(0.0, 0.0, 0.0, 100.0, 100.0, 0.0)
d.circle(50.0, 50.0, 0.0, 25.0)
d.arc(0.0, 0.0, 0.0, 100.0, 0.0, 60.0)
d.set_ext()              # set $EXTMIN / $EXTMAX from the entities
d.save_as("shapes.dxf")
```

New entities go on the current layer. A layer becomes current when it is added
with `set_current=True`, or later through `change_layer`. Passing `None` as the
line type gives the layer the `Continuous` line type.

```python
d.add_layer("Walls", 1, None, True)
d.add_line_type("DASHED", "Dashed __ __ __", 0.5, -0.25)
d.add_style("Mono", "courier.ttf", "", True)
d.change_layer("Walls")
d.text("Hello", 10.0, 10.0, 0.0, 2.5)
```

Adding a layer, style or line type under a name that is already taken raises
`ValueError`. Looking up a missing one with `layer`, `style` or `line_type`
raises `KeyError`.

`polyline`, `lw_polyline` and `three_d_face` take vertex lists. Entities can be
collected into named groups with `group` and `add_to_group`.

`write_to(stream)` writes the document to any text or binary stream and returns
the byte count. A `Drawing` can also be read like a file with `read(size)`. The
rendered bytes are kept until `close()` is called or a `with` block ends.

## Reading a drawing

```python
from dxfdraw.reader import from_file, from_string

d = from_file("shapes.dxf")
for entity in d.entities:
    print(entity)
```

`from_reader` accepts any iterable of lines, either text or bytes, such as an
open file. When the input cannot be parsed, `dxfdraw.parsing.DxfError` (a
`ValueError`) is raised. Errors found inside a section carry the line number
in the message.

What the reader takes in:

- HEADER: `$ACADVER`, `$INSBASE`, `$EXTMIN`, `$EXTMAX`, `$LTSCALE`,
  `$INSUNITS` and `$LUNITS`.
- TABLES: all nine tables. Each table replaces the default one, and layers are
  registered in `Drawing.layers`.
- ENTITIES: LINE, 3DFACE, LWPOLYLINE, CIRCLE, ARC, POINT and TEXT.

## Limitations

- Any other entity type in the ENTITIES section, such as POLYLINE, VERTEX or
  SPLINE, stops reading with a `DxfError`. These entities can still be created
  and written.
- The BLOCKS section is checked for errors, but the blocks it holds are not
  added to the drawing.
- The CLASSES and OBJECTS sections are skipped, so groups are not read back.
- Binary DXF is neither read nor written.

## Extrusion

`dxfdraw.geometry.set_extrusion` uses the Arbitrary Axis Algorithm to give an
entity such as a circle a new extrusion direction. The entity's reference point
is converted along with it. `arbitrary_axis` returns the X and Y axes for a
given Z direction.

## Colours and units

`dxfdraw.color.color_index` finds the colour number nearest to an RGB value,
and `index_color` gives the RGB value of a colour number. `dxfdraw.insunit`
provides the `Unit` and `UnitType` enumerations, together with
`unit_from_string` and `type_from_string`.

## Example command

```
dxfdraw-torus [output]
```

This writes a torus drawn from circles to `output`, which defaults to
`torus.dxf` in the current directory.

## Running the tests

```
pip install -e ".[test]"
pytest
```