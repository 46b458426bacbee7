# plotweave

Building blocks for drawing plots: colors and shape styles, relative sizes,
font and text styles, drawable elements, and series that turn data into
elements.

The package does not rasterize anything itself. Elements draw onto a
*backend*: any object that offers the drawing calls an element needs:
`draw_pixel(point, color)`, `draw_line(start, end, color)`,
`draw_path(points, style)`, `draw_rect(upper_left, bottom_right, style, fill)`,
`draw_circle(center, radius, style, fill)`, `fill_polygon(points, color)`,
`draw_text(text, style, pos)` and `blit_bitmap(pos, size, buffer)`. Points
reach an element's `draw` already translated into pixel coordinates.

## Installation

```
pip install plotweave
```

## Colors and styles

```python
from plotweave.color import RGBColor, HSLColor, Palette99, ShapeStyle

red = RGBColor(255, 0, 0)
faded = red.mix(0.5)                  # RGBAColor with alpha 0.5
style = red.stroke_width(3)           # ShapeStyle, not filled
solid = ShapeStyle.from_color(red).as_filled()

HSLColor(0.0, 1.0, 0.5).rgb()         # (255, 0, 0)
Palette99.pick(3).rgb()               # (255, 0, 0)
```

Predefined colors `WHITE`, `BLACK`, `RED`, `GREEN`, `BLUE`, `YELLOW`, `CYAN`,
`MAGENTA` and `TRANSPARENT` live in `plotweave.color`, along with the palettes
`Palette99`, `Palette9999` and `Palette100`. `to_shape_style` accepts either a
`ShapeStyle` or any `Color`.

## Relative sizes

```python
from plotweave.size import percent, percent_width, size_in_pixels

percent_width(10).in_pixels((100, 200))           # 10
percent_width(10).min(30).in_pixels((100, 200))   # 30
size_in_pixels(percent(10), (400, 200))           # 20
```

A parent is a `(width, height)` tuple or an object with a `dim()`,
`dim_in_pixel()` or `get_size()` method.

## Fonts and text

```python
from plotweave.font import into_font
from plotweave.text_style import into_text_style
from plotweave.text import MultiLineText

font = into_font(("sans-serif", 20))
font.box_size("hello")

style = into_text_style(("serif", 16), (640, 480))
block = MultiLineText.from_str("first line\nsecond line", (10, 10), style, 0)
block.compute_line_layout()
```

Text sizes are estimated from the font size and the UTF-8 length of the text;
no font files are loaded or measured. `FontTransform` rotates the estimated
box by 90, 180 or 270 degrees.

## Elements

```python
from plotweave.basic_shapes import Circle, PathElement, Rectangle
from plotweave.composable import EmptyElement
from plotweave.color import RGBColor

blue = RGBColor(0, 0, 255)
marker = (
    EmptyElement.at((200, 200))
    + Circle((0, 0), 3, blue.filled())
    + Rectangle([(0, 0), (10, 12)], blue)
)
```

Any element yields its key points with `point_iter()` and draws with
`draw(points, backend, parent_dim)`. `plotweave.element.into_dyn` wraps any
element into a `DynElement`. Further elements:

- `plotweave.basic_shapes`: `Pixel`, `PathElement`, `Rectangle`, `Circle`, `Polygon`
- `plotweave.points`: `Cross`, `TriangleMarker`
- `plotweave.text`: `Text`, `MultiLineText`
- `plotweave.candlestick`: `CandleStick`
- `plotweave.boxplot`: `Boxplot` (vertical or horizontal, from five quartile values)
- `plotweave.errorbar`: `ErrorBar`
- `plotweave.image`: `BitMapElement`

## Series

```python
from plotweave.series import LineSeries, AreaSeries, PointSeries
from plotweave.points import Cross
from plotweave.color import RGBColor

red = RGBColor(255, 0, 0)
line = LineSeries([(x, x * x) for x in range(10)], red).point_size(2)
for element in line:
    ...  # a circle for each point, then one path

area = AreaSeries([(0, 1), (1, 3), (2, 2)], 0, red).border_style(red)
crosses = PointSeries([(1, 1), (2, 4)], 4, red, Cross)
```

## What the package does not do

There is no coordinate system, chart builder, axis or mesh drawing, and no
histogram series. No backend is included: nothing is rendered to images,
SVG or the screen unless you supply an object with the drawing calls above.

## Running the tests

```
pip install -e ".[test]"
pytest
```