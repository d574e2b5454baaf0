"""Desktop window for the editor, and the command that starts it."""

from __future__ import annotations

import argparse

from imagex.editor import Editor
from imagex.filters import FilterType
from imagex.view import scale_to_fit

__all__ = ["MainWindow", "parse_args", "main"]

_FILE_TYPES = [("Images", "*.png *.xpm *.jpg *.bmp")]

_FILTER_BUTTONS = [
    ("Normal", FilterType.NORMAL),
    ("Grayscale", FilterType.GRAYSCALE),
    ("Sepia", FilterType.SEPIA),
    ("Invert", FilterType.INVERT),
    ("Cool", FilterType.COOL),
    ("Warm", FilterType.WARM),
    ("Background Remove", FilterType.BACKGROUND_REMOVE),
]


class MainWindow:
    """Sidebar of sliders and filter buttons beside a scaled image view."""

    def __init__(self, root, editor: Editor | None = None) -> None:
        import tkinter as tk

        self._tk = tk
        self.root = root
        self.editor = editor if editor is not None else Editor()
        self._photo = None
        root.title("Image X")
        root.geometry("1280x720")
        self._build_menu()
        self._build_body()
        root.bind("<Control-z>", lambda _event: self._undo())
        root.bind("<Control-y>", lambda _event: self._redo())

    def _build_menu(self) -> None:
        tk = self._tk
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Open", command=self.open_image)
        file_menu.add_command(label="Save", command=self.save_image)
        file_menu.add_command(label="Exit", command=self.root.destroy)
        menubar.add_cascade(label="File", menu=file_menu)
        edit_menu = tk.Menu(menubar, tearoff=False)
        edit_menu.add_command(label="Undo", command=self._undo)
        edit_menu.add_command(label="Redo", command=self._redo)
        menubar.add_cascade(label="Edit", menu=edit_menu)
        help_menu = tk.Menu(menubar, tearoff=False)
        help_menu.add_command(label="About")
        help_menu.add_command(label="Help")
        menubar.add_cascade(label="Help", menu=help_menu)
        self.root.config(menu=menubar)

    def _build_body(self) -> None:
        tk = self._tk
        sidebar = tk.Frame(self.root, width=200, borderwidth=1, relief=tk.SOLID)
        sidebar.pack(side=tk.LEFT, fill=tk.Y, padx=4, pady=4)

        sliders = [
            ("Blur", 0, 100, 0, self.editor.set_blur),
            ("Brightness", -100, 100, 0, self.editor.set_brightness),
            ("Contrast", 0, 300, 100, self.editor.set_contrast),
        ]
        for label, low, high, initial, setter in sliders:
            tk.Label(sidebar, text=label).pack(anchor=tk.W)
            scale = tk.Scale(sidebar, from_=low, to=high, orient=tk.HORIZONTAL, length=180)
            scale.set(initial)
            scale.configure(command=lambda value, apply=setter: self._change(apply, int(float(value))))
            scale.bind("<ButtonRelease-1>", lambda _event: self.editor.commit())
            scale.pack(fill=tk.X)

        for label, filter_type in _FILTER_BUTTONS:
            tk.Button(
                sidebar,
                text=label,
                command=lambda chosen=filter_type: self._change(self.editor.set_filter, chosen),
            ).pack(fill=tk.X)

        self.image_area = tk.Label(
            self.root, bg="#222", fg="white", font=("TkDefaultFont", 24), width=600, height=400
        )
        self.image_area.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.image_area.bind("<Configure>", lambda _event: self.refresh())

    def _change(self, apply, value) -> None:
        apply(value)
        self.refresh()

    def _undo(self) -> None:
        self.editor.undo()
        self.refresh()

    def _redo(self) -> None:
        self.editor.redo()
        self.refresh()

    def open_image(self) -> None:
        """Ask for a file and show it; cancelling records the current image."""
        from tkinter import filedialog, messagebox

        path = filedialog.askopenfilename(parent=self.root, title="Open Image", filetypes=_FILE_TYPES)
        if not path:
            self.editor.commit()
            return
        try:
            self.editor.open(path)
        except OSError as error:
            messagebox.showerror("Open Image", str(error), parent=self.root)
            return
        self.refresh()

    def save_image(self) -> None:
        """Ask for a file name and write the displayed image to it."""
        from tkinter import filedialog, messagebox

        if self.editor.pixels is None:
            return
        path = filedialog.asksaveasfilename(parent=self.root, title="Save Image", filetypes=_FILE_TYPES)
        if not path:
            return
        try:
            self.editor.save(path)
        except (OSError, ValueError, KeyError) as error:
            messagebox.showerror("Save Image", str(error), parent=self.root)

    def refresh(self) -> None:
        """Redraw the displayed image scaled to the current view size."""
        from PIL import ImageTk

        image = self.editor.image
        if image is None:
            return
        bounds = (self.image_area.winfo_width(), self.image_area.winfo_height())
        try:
            scaled = scale_to_fit(image, bounds)
        except ValueError:
            return
        self._photo = ImageTk.PhotoImage(scaled)
        self.image_area.configure(image=self._photo)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="imagex", description="A small raster image editor.")
    parser.add_argument("image", nargs="?", help="image file to open at start")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    import tkinter as tk

    args = parse_args(argv)
    root = tk.Tk()
    window = MainWindow(root)
    root.title("ImageX")
    root.geometry("400x300")
    if args.image:
        window.editor.open(args.image)
        window.refresh()
    root.mainloop()
    return 0