"""The viewer window and the command-line entry point."""

from __future__ import annotations

import sys
from typing import Any, Sequence

import numpy as np

from .args import UsageError, parse_args, usage_text
from .hooks import BUTTON_SCROLL_DOWN, BUTTON_SCROLL_UP, Action, handle_key, handle_mouse
from .printf import printf
from .render import View, render

WINDOW_TITLE = "fract-ol"


def _to_ppm(pixels: np.ndarray) -> bytes:
    height, width = pixels.shape
    rgb = np.stack(
        [(pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF], axis=-1
    ).astype(np.uint8)
    return f"P6 {width} {height} 255\n".encode("ascii") + rgb.tobytes()


class Viewer:
    """Shows a view in a window and redraws it as keys and the mouse move it."""

    def __init__(self, view: View) -> None:
        self.view = view
        self.pixels: np.ndarray | None = None
        self._root: Any = None
        self._label: Any = None
        self._photo: Any = None

    def redraw(self) -> np.ndarray:
        """Render the view again and show it if the window is open."""
        self.pixels = render(self.view)
        if self._label is not None:
            import tkinter as tk

            self._photo = tk.PhotoImage(
                master=self._root, data=_to_ppm(self.pixels), format="PPM"
            )
            self._label.configure(image=self._photo)
        return self.pixels

    def _apply(self, action: Action) -> None:
        if action is Action.CLOSE:
            self._close()
        elif action is Action.REDRAW:
            self.redraw()

    def _close(self) -> None:
        if self._root is not None:
            self._root.destroy()

    def _on_key(self, event: Any) -> None:
        self._apply(handle_key(self.view, event.keysym_num))

    def _on_button(self, event: Any) -> None:
        self._apply(handle_mouse(self.view, event.num, event.x, event.y))

    def _on_wheel(self, event: Any) -> None:
        button = BUTTON_SCROLL_UP if event.delta > 0 else BUTTON_SCROLL_DOWN
        self._apply(handle_mouse(self.view, button, event.x, event.y))

    def run(self) -> None:
        """Open the window and handle events until it is closed.

        Raises RuntimeError when no window can be opened.
        """
        import tkinter as tk

        try:
            root = tk.Tk()
        except tk.TclError as exc:
            raise RuntimeError(f"cannot open a window: {exc}") from exc
        self._root = root
        try:
            root.title(WINDOW_TITLE)
            root.resizable(False, False)
            self._label = tk.Label(root, borderwidth=0, highlightthickness=0)
            self._label.pack()
            self.redraw()
            root.protocol("WM_DELETE_WINDOW", self._close)
            root.bind("<Key>", self._on_key)
            self._label.bind("<Button>", self._on_button)
            self._label.bind("<MouseWheel>", self._on_wheel)
            root.mainloop()
        finally:
            self._root = None
            self._label = None
            self._photo = None


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the command line and run the viewer; print usage on bad input."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        view = parse_args(args)
    except UsageError:
        printf(usage_text())
        return 0
    try:
        Viewer(view).run()
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0