# sigwidgets

This package models the widgets used to inspect radio and baseband signals,
without tying them to any GUI toolkit. It also holds the number-formatting
helpers those widgets share. Each class keeps the state a display needs and
does its arithmetic. It hands back values, labels, screen coordinates and
line descriptions, and any drawing library can render these.

## Modules

- `sigwidgets.helpers` formats quantities:
  - `format_quantity` adds SI prefixes to quantities, with special handling
    for time (`s`), Unix dates (`unix`) and degrees (`deg` and `º`).
  - `format_quantity_auto` and `format_quantity_from_delta` choose the
    precision for you.
  - The module also has `format_power_of_10`, `format_binary_quantity`,
    `format_real`, `format_complex`, `format_scientific`,
    `format_integer_part` and `to_super_index`.
  - `ensure_extension` and `extract_filter_extension` handle file names.
  - `kahan_mean_and_rms` computes a compensated mean and RMS of complex
    samples. It can keep a running `KahanState` between calls.
  - `calc_limits` finds per-component limits of complex samples.
- `sigwidgets.lcd` models a seven-segment numeric display (`LCD`):
  - The value is clamped to its limits.
  - Digits can be selected, scrolled and typed through `Key` presses.
  - A lock blocks edits.
  - `segment_mask`, `Segment` and `compute_geometry` (which returns
    `LCDGeometry`) describe the glyphs and their sizes.
- `sigwidgets.histogram` counts decision values over bins (`Histogram`):
  - The bins span a decision range (`DecisionRange`, `DecisionMode`).
  - `feed` takes real samples and `feed_complex` takes complex ones, binned
    by phase or by modulus.
  - `division_length` and `axis_labels` give the axis grid.
  - `select` narrows the range and `reset_decider` restores it.
- `sigwidgets.scispinbox` models a bounded real value shown as
  mantissa × 10^exponent with units (`SciSpinBox`). `representation()`
  returns the texts and spin settings as a `Representation`.
- `sigwidgets.multitoolbox` is a toolbox in which several sections can be
  expanded at once (`MultiToolBox`, `ToolBoxItem`). It has a current page
  and produces the header labels.
- `sigwidgets.phaseview` is a polar phase / angle-of-arrival view
  (`PhaseView`). Samples go into a ring buffer (`SampleRing`). The view
  produces tick marks, `phase_lines` and `aoa_lines`. `phase_to_color_index`
  maps a phase to a 1024-entry hue table.
- `sigwidgets.polarization` builds polarization ellipses from pairs of
  horizontal and vertical Jones vector samples (`PolarizationView`).
- `sigwidgets.led` is an on/off indicator in one of three colours (`LED`,
  `LEDColor`). `icon_name` names the image for the current state.
- `sigwidgets.vertical_label` lays out text rotated by 270 degrees, so that
  it reads bottom to top (`VerticalLabel`). It gives transposed size hints
  and the rectangle the text is centred in.

## Example

```python
from sigwidgets.helpers import format_quantity, format_binary_quantity
from sigwidgets.lcd import LCD

format_quantity(1500.0, 3, "Hz")      # '1.50 kHz'
format_binary_quantity(2048, "B")     # '2.000 KiB'

lcd = LCD(value=1234)
lcd.select_digit(0)
lcd.scroll_digit(0, +1)
lcd.value                             # 1235
```

## What it does not do

The package does not draw anything. It has no windows, no event loop and no
mouse or timer handling, and it provides no command-line program. Wiring the
models to a screen is left to the application that uses them.

## Running the tests

```
pip install -e .[test]
pytest
```