# imagex

A small desktop editor for raster images. Open a picture, pick a colour
filter, blur it, change its brightness and contrast, step back and forth
through your edits, and save the result.

## Installing

```
pip install .
```

The window is built with Tkinter, which ships with most Python
installations; on some systems it comes as a separate package (for
example `python3-tk`). Pillow must be built with Tk support for the image
view to work.

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Running the editor

```
imagex
```

You can also give it a picture to open straight away:

```
imagex photo.jpg
```

The window has a **File** menu with *Open*, *Save* and *Exit*, an **Edit**
menu with *Undo* (Ctrl+Z) and *Redo* (Ctrl+Y), and a **Help** menu whose
*About* and *Help* entries have no action. The file dialogs offer PNG,
XPM, JPEG and BMP files; when saving, the format follows the file name's
suffix, and an error is shown if the image cannot be written in that
format.

The sidebar holds:

- **Blur**, 0 to 100. A value *n* applies a Gaussian blur with a kernel of
  2·*n* + 1 pixels, reflecting at the borders; 0 turns blurring off.
- **Brightness**, −100 to 100, added to every channel.
- **Contrast**, 0 to 300 percent, with 100 leaving the image unchanged.
- Filter buttons: *Normal*, *Grayscale*, *Sepia*, *Invert*, *Cool*,
  *Warm* and *Background Remove*.

Every change is applied to the image as it was opened, in this order:
colour filter, then blur, then contrast and brightness; results are
rounded and clipped to 0–255. The picture is scaled to fit the view,
keeping its aspect ratio, and rescaled when the window is resized.

Releasing a slider records the current picture in the undo history;
opening a picture records it too, and so does cancelling the *Open*
dialog once a picture is shown. A new entry clears anything that could be
redone.

## What it does not do

The *Background Remove* button is there, but no background removal is
performed: choosing it leaves the colours as they are, and blur,
brightness and contrast still apply.

## Using it from Python

The editing logic does not need the window. `imagex.editor.Editor` holds
the opened image, the slider values, the chosen filter and the history:

```python
from imagex.editor import Editor
from imagex.filters import FilterType

editor = Editor()
editor.open("photo.jpg")
editor.set_filter(FilterType.SEPIA)
editor.set_blur(3)
editor.set_contrast(120)
editor.commit()
editor.save("photo-sepia.png")

editor.undo()
editor.redo()
```

`Editor.load` takes a Pillow image or a `uint8` array of shape
`(height, width, 3)` instead of a file. The displayed picture is
available as `editor.pixels` (a NumPy array) and `editor.image` (a Pillow
image), both `None` before anything is loaded. The setters raise
`ValueError` for values outside the slider ranges, `save` raises
`ValueError` when there is no image, and `undo` / `redo` do nothing when
there is nothing to step to.

The filters live in `imagex.filters` and work on NumPy arrays of 8-bit
RGB pixels:

- `to_grayscale` – luma (0.299 R + 0.587 G + 0.114 B) in all three
  channels
- `to_sepia` – the classic sepia colour matrix
- `invert` – the negative
- `cool` – red raised by 20
- `warm` – green and blue raised by 20
- `gaussian_blur(pixels, radius)`
- `adjust(pixels, alpha, beta)` – `alpha * pixel + beta`
- `apply_filters(pixels, filter_type, blur, brightness, contrast)` – the
  whole pipeline in one call

`FilterType` names the filters. Arrays of any other shape or type raise
`ValueError`.

`imagex.history.History` is the undo/redo store on its own: `push`
(ignores `None`), `undo(current)` and `redo(current)` (raise `IndexError`
when empty), `can_undo()` and `can_redo()`.

`imagex.view.fit_size(image_size, bounds)` gives the largest size with the
image's aspect ratio that fits `bounds`, and `scale_to_fit(image, bounds)`
resizes a Pillow image to it.