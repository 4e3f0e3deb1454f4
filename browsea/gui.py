"""Tk window that shows the browser picker and its settings page."""

from __future__ import annotations

import logging
import tkinter as tk
from collections.abc import Callable
from tkinter import filedialog

from PIL import Image, ImageTk

from .launcher import LaunchError
from .picker import BrowserEntry, Picker, grid_layout
from .theme import RGB

log = logging.getLogger(__name__)

TITLE = "Browsea"
WINDOW_WIDTH = 200
WINDOW_HEIGHT = 300
HEADER_HEIGHT = 40
FONT_FAMILY = "Segoe UI"
ROUND_BUTTON_SIZE = 32
SMALL_BUTTON_SIZE = 18
CROSS_COLOR: RGB = (239, 68, 68)
BROWSER_LIST_WIDTH = 280


def hex_color(rgb: RGB) -> str:
    """Format an RGB triple as a Tk colour string such as '#6a8edb'."""
    if len(rgb) != 3 or not all(isinstance(c, int) and 0 <= c <= 255 for c in rgb):
        raise ValueError(f"not an RGB colour: {rgb!r}")
    red, green, blue = rgb
    return f"#{red:02x}{green:02x}{blue:02x}"


class PickerWindow:
    """Shows the browsers of a :class:`Picker` and lets the user choose one."""

    def __init__(self, picker: Picker) -> None:
        self.picker = picker
        self.icon_path: str | None = None
        self._root: tk.Tk | None = None
        self._content: tk.Frame | None = None
        self._photos: list[ImageTk.PhotoImage] = []
        self._app_icon: ImageTk.PhotoImage | None = None

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        root = tk.Tk()
        self._root = root
        root.title(TITLE)
        root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        root.attributes("-topmost", True)
        self._center(root)
        self._apply_icon(root)
        self._content = tk.Frame(root)
        self._content.pack(fill="both", expand=True)
        self._render()
        try:
            root.mainloop()
        finally:
            self._root = None
            self._content = None
            self._photos.clear()
            self._app_icon = None

    def show_picker(self) -> None:
        """Switch to the page listing the browsers to choose from."""
        self.picker.show_settings = False
        self._render()

    def show_settings(self) -> None:
        """Switch to the settings page."""
        self.picker.show_settings = True
        self._render()

    # -- window helpers ----------------------------------------------------

    @staticmethod
    def _center(root: tk.Tk) -> None:
        root.update_idletasks()
        x = max(0, (root.winfo_screenwidth() - WINDOW_WIDTH) // 2)
        y = max(0, (root.winfo_screenheight() - WINDOW_HEIGHT) // 2)
        root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}+{x}+{y}")

    def _apply_icon(self, root: tk.Tk) -> None:
        if not self.icon_path:
            return
        try:
            with Image.open(self.icon_path) as opened:
                image = opened.convert("RGBA")
        except (OSError, ValueError):
            log.error("Failed to load application icon: %s", self.icon_path)
            return
        self._app_icon = ImageTk.PhotoImage(image)
        root.iconphoto(True, self._app_icon)

    def _close(self) -> None:
        if self._root is not None:
            self._root.destroy()

    def _photo(self, image: Image.Image, size: int) -> ImageTk.PhotoImage:
        photo = ImageTk.PhotoImage(image.resize((size, size), Image.Resampling.LANCZOS))
        self._photos.append(photo)
        return photo

    def _render(self) -> None:
        if self._root is None or self._content is None:
            return
        for child in self._content.winfo_children():
            child.destroy()
        self._photos.clear()
        background = hex_color(self.picker.theme.background)
        self._root.configure(bg=background)
        self._content.configure(bg=background)
        if self.picker.show_settings:
            self._render_settings(self._content)
        else:
            self._render_picker(self._content)

    def _round_button(
        self,
        parent: tk.Misc,
        command: Callable[[], None],
        *,
        text: str | None = None,
        image: ImageTk.PhotoImage | None = None,
    ) -> tk.Canvas:
        theme = self.picker.theme
        size = ROUND_BUTTON_SIZE
        canvas = tk.Canvas(
            parent,
            width=size,
            height=size,
            bg=hex_color(theme.background),
            highlightthickness=0,
            cursor="hand2",
        )
        normal = hex_color(theme.button_bg)
        hover = hex_color(theme.button_hover)
        oval = canvas.create_oval(1, 1, size - 1, size - 1, fill=normal, outline=normal)
        if image is not None:
            canvas.create_image(size // 2, size // 2, image=image)
        else:
            canvas.create_text(
                size // 2,
                size // 2,
                text=text or "",
                font=(FONT_FAMILY, 14),
                fill=hex_color(theme.foreground),
            )
        canvas.bind("<Enter>", lambda _event: canvas.itemconfigure(oval, fill=hover))
        canvas.bind("<Leave>", lambda _event: canvas.itemconfigure(oval, fill=normal))
        canvas.bind("<Button-1>", lambda _event: command())
        return canvas

    # -- picker page -------------------------------------------------------

    def _render_picker(self, parent: tk.Frame) -> None:
        theme = self.picker.theme
        background = hex_color(theme.background)

        header = tk.Frame(parent, bg=background, height=HEADER_HEIGHT)
        header.pack(fill="x", pady=(4, 0))
        self._round_button(header, self.show_settings, text="⚙").pack(
            side="right", padx=(0, 16)
        )

        area = tk.Frame(parent, bg=background)
        area.pack(fill="both", expand=True)

        assert self._root is not None
        self._root.update_idletasks()
        width = self._root.winfo_width()
        height = self._root.winfo_height() - HEADER_HEIGHT
        if width <= 1:
            width = WINDOW_WIDTH
        if height <= 1:
            height = WINDOW_HEIGHT - HEADER_HEIGHT

        entries = [
            (index, entry)
            for index, entry in enumerate(self.picker.browsers)
            if self.picker.is_visible(entry.name)
        ]
        layout = grid_layout(width, height, len(entries))

        grid = tk.Frame(area, bg=background)
        grid.pack(pady=(max(0, int(layout.vertical_padding)), 0))
        for row, items in enumerate(layout.chunk(entries)):
            for column, (index, entry) in enumerate(items):
                button = self._browser_button(grid, index, entry)
                button.grid(row=row, column=column, padx=4, pady=4)

    def _browser_button(self, parent: tk.Misc, index: int, entry: BrowserEntry) -> tk.Button:
        theme = self.picker.theme
        options = dict(
            bg=hex_color(theme.button_bg),
            activebackground=hex_color(theme.button_hover),
            relief="flat",
            borderwidth=0,
            cursor="hand2",
            command=lambda: self._choose(index),
        )
        if entry.icon is not None:
            photo = self._photo(entry.icon, 48)
            return tk.Button(parent, image=photo, width=60, height=60, **options)
        return tk.Button(
            parent,
            text=entry.name,
            font=(FONT_FAMILY, 16),
            fg=hex_color(theme.foreground),
            wraplength=60,
            **options,
        )

    def _choose(self, index: int) -> None:
        try:
            self.picker.launch(index)
        except LaunchError as exc:
            log.error("%s", exc)
        self._close()

    # -- settings page -----------------------------------------------------

    def _render_settings(self, parent: tk.Frame) -> None:
        theme = self.picker.theme
        background = hex_color(theme.background)

        header = tk.Frame(parent, bg=background)
        header.pack(fill="x", pady=(4, 0))
        self._round_button(header, self.show_picker, text="⬅").pack(side="left", padx=(4, 0))

        theme_icon = self.picker.sun_icon if self.picker.dark_mode else self.picker.moon_icon
        photo = self._photo(theme_icon, 20) if theme_icon is not None else None
        self._round_button(
            header,
            self._toggle_theme,
            text=None if photo is not None else ("☀" if self.picker.dark_mode else "☾"),
            image=photo,
        ).pack(side="right", padx=(0, 16))

        tk.Label(
            parent,
            text="BROWSERS",
            font=(FONT_FAMILY, 36, "bold"),
            fg=hex_color(theme.primary),
            bg=background,
        ).pack(pady=(24, 8))

        listing = tk.Frame(parent, bg=background, width=BROWSER_LIST_WIDTH)
        listing.pack()
        for index, entry in enumerate(self.picker.browsers):
            self._settings_row(listing, index, entry).pack(fill="x", pady=(0, 2))

        tk.Button(
            parent,
            text="➕ Add Custom Browser",
            font=(FONT_FAMILY, 14),
            fg=hex_color(theme.foreground),
            bg=hex_color(theme.button_bg),
            activebackground=hex_color(theme.button_hover),
            relief="flat",
            cursor="hand2",
            command=self._add_custom_browser,
        ).pack(pady=16, ipadx=8, ipady=4)

    def _settings_row(self, parent: tk.Misc, index: int, entry: BrowserEntry) -> tk.Frame:
        theme = self.picker.theme
        background = hex_color(theme.background)
        row = tk.Frame(parent, bg=background)

        if entry.icon is not None:
            tk.Label(row, image=self._photo(entry.icon, 40), bg=background).pack(
                side="left", padx=4
            )
        tk.Label(
            row,
            text=entry.name,
            font=(FONT_FAMILY, 14),
            fg=hex_color(theme.foreground),
            bg=background,
        ).pack(side="left")

        self._delete_button(row, index).pack(side="right")
        self._checkbox(row, entry.name).pack(side="right", padx=(0, 8))
        return row

    def _delete_button(self, parent: tk.Misc, index: int) -> tk.Canvas:
        theme = self.picker.theme
        size = SMALL_BUTTON_SIZE
        canvas = tk.Canvas(
            parent,
            width=size,
            height=size,
            bg=hex_color(theme.background),
            highlightthickness=0,
            cursor="hand2",
        )
        normal = hex_color(theme.button_bg)
        hover = hex_color(theme.button_hover)
        circle = canvas.create_oval(0, 0, size, size, fill=normal, outline="")
        pad = 5
        red = hex_color(CROSS_COLOR)
        canvas.create_line(pad, pad, size - pad, size - pad, fill=red, width=2)
        canvas.create_line(pad, size - pad, size - pad, pad, fill=red, width=2)
        canvas.bind("<Enter>", lambda _event: canvas.itemconfigure(circle, fill=hover))
        canvas.bind("<Leave>", lambda _event: canvas.itemconfigure(circle, fill=normal))
        canvas.bind("<Button-1>", lambda _event: self._remove_browser(index))
        return canvas

    def _checkbox(self, parent: tk.Misc, name: str) -> tk.Canvas:
        theme = self.picker.theme
        size = SMALL_BUTTON_SIZE
        visible = self.picker.is_visible(name)
        canvas = tk.Canvas(
            parent,
            width=size,
            height=size,
            bg=hex_color(theme.background),
            highlightthickness=0,
            cursor="hand2",
        )
        fill = hex_color(theme.primary if visible else theme.button_bg)
        canvas.create_rectangle(1, 1, size - 1, size - 1, fill=fill, outline=hex_color(theme.primary))
        if visible:
            check = hex_color(theme.background)
            canvas.create_line(4, 9, 8, 13, fill=check, width=2)
            canvas.create_line(8, 13, 14, 5, fill=check, width=2)
        canvas.bind("<Button-1>", lambda _event: self._toggle_visible(name))
        return canvas

    def _toggle_theme(self) -> None:
        self.picker.toggle_dark_mode()
        self._render()

    def _toggle_visible(self, name: str) -> None:
        self.picker.set_visible(name, not self.picker.is_visible(name))
        self._render()

    def _remove_browser(self, index: int) -> None:
        self.picker.remove_browsers([index])
        self._render()

    def _add_custom_browser(self) -> None:
        path = filedialog.askopenfilename(
            parent=self._root,
            title="Select Browser Executable",
            filetypes=[("Executable", "*.exe")],
        )
        if not path:
            return
        try:
            self.picker.add_custom_browser(path)
        except ValueError as exc:
            log.error("%s", exc)
            return
        self._render()