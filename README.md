# tuigallery

A collection of small, self-contained terminal user interface demos built on
`rich` for rendering and `blessed` for the terminal. Each one takes over the
full screen (alternate screen, hidden cursor) and restores the terminal when
it exits.

## Installation

```
pip install tuigallery
```

For running the test suite:

```
pip install "tuigallery[test]"
pytest
```

## Demos

| Command                  | What it shows                                                                         |
|--------------------------|---------------------------------------------------------------------------------------|
| `tuigallery-elm`         | A counter driven by a model / message / update loop: `j` up, `k` down, `q` quits. It resets to 0 past 50 or -50. |
| `tuigallery-button`      | Three themed buttons (Red, Green, Blue); left/right or `h`/`l` select, space toggles, `q` quits. |
| `tuigallery-explorer`    | Layout constraint explorer: `h`/`l` select, `k`/`j` edit, `1`-`6` swap kind, `a` add, `x` delete, `+`/`-` spacing, `q` or Escape quits. Every flex mode (Start, Center, End, SpaceAround, SpaceBetween) is shown. |
| `tuigallery-constraints` | Tabs of layout constraint examples: `h`/`l` change tab, `j`/`k` scroll, `g`/`G` jump to top or bottom, `q` quits. |
| `tuigallery-barchart`    | Vertical and horizontal bar charts of 24 random hourly temperatures (50 to 89), coloured yellow to red. |
| `tuigallery-canvas`      | Four canvas panels: a position label moved with `h`/`j`/`k`/`l`, a drawing panel, a bouncing ball and growing rectangles. The marker style cycles every 180 ticks. |
| `tuigallery-chart`       | Two scrolling sine waves, a bell-curve bar graph, a line chart and a scatter plot of payload costs. |
| `tuigallery-demo`        | A dashboard with three tabs: gauges, sparkline, lists, bar chart and signal chart; a server table with a world canvas; and a colour table. |
| `tuigallery-grouped`     | Grouped bar charts of four months of revenue for three companies.                     |
| `tuigallery-colors`      | The sixteen named colours, the 256 indexed colours and the grayscale ramp.            |

All demos quit with `q`.

The dashboard accepts two options:

```
tuigallery-demo --tick-rate 250 --enhanced-graphics true
```

`--tick-rate` is the time in milliseconds between two ticks (default 250, not
negative), and `--enhanced-graphics` (`true` or `false`, default `true`)
chooses finer Unicode symbols for gauges, sparklines, bars and the map
canvas. In the dashboard, left/right (or `h`/`l`) switch tabs, up/down (or
`k`/`j`) move through the task list, and `t` hides or shows the signal chart.

## Using the pieces

The state behind each demo is plain Python and can be driven without a
terminal. The counter model:

```python
from tuigallery.elm import Message, Model, process

model = Model()
process(model, Message.INCREMENT)
print(model.counter)  # 1
```

The dashboard state and its drawing:

```python
from tuigallery.demo_app import App
from tuigallery.demo_ui import draw
from tuigallery.terminal import render_to_text

app = App("Dashboard", True)
app.on_right()
app.on_tick()
print(app.tabs.index, app.progress)
print(render_to_text(draw(app, 100, 40), 100, 40))
```

Other reusable parts include `tuigallery.signals.SinSignal` and
`RandomSignal` (endless data sources), `tuigallery.button.ButtonBar`
(keyboard and mouse handling for three buttons), `tuigallery.explorer.ExplorerApp`,
`tuigallery.constraints.ConstraintsApp`, `tuigallery.canvas_demo.CanvasApp`
and `tuigallery.chart_demo.ChartApp`, each with a `render(width, height)`
method returning a `rich` `Text`.

`tuigallery.terminal.render_to_text(renderable, width, height)` turns any
renderable into plain text of exactly `height` lines of `width` cells, which
is handy for snapshots and tests. `tuigallery.terminal.Terminal` is the
context manager the commands use to draw frames and read keys.

## Limitations

- Only keyboard input is read. No command enables mouse reporting, so the
  button demo cannot be clicked and the canvas drawing panel stays empty when
  run from the terminal; `ButtonBar.handle_mouse` and `CanvasApp.add_point`
  are there for driving those parts from code.
- The world panels in the canvas demo and the dashboard draw no map outline:
  they show the position label, or the servers, links and shapes, on an empty
  background.
- The layout engine behind the explorer and constraints demos is a simple
  approximation of constraint solving and flex placement, meant for
  illustration.