"""Main application window: the settings editor."""

import customtkinter as ctk
from typing import TYPE_CHECKING, Callable, Optional
import logging

from PIL import ImageTk

from .form import QUALITY_MAX, QUALITY_MIN, settings_from_form, worker_choices
from .icon import create_icon_image
from ..storage.settings import Settings
from ..i18n import _

if TYPE_CHECKING:
    from ..app import PicDiskSlimmerApp

logger = logging.getLogger(__name__)


class MainWindow(ctk.CTk):
    """Window that edits and saves the application settings."""

    def __init__(
        self,
        app: "PicDiskSlimmerApp",
        settings: Settings,
        on_close: Optional[Callable] = None,
        **kwargs,
    ):
        """Initialize the main window.

        Args:
            app: The main application instance
            settings: Settings to show initially
            on_close: Callback when window is closed
            **kwargs: Additional arguments for CTk
        """
        super().__init__(**kwargs)

        self.app = app
        self._settings = settings
        self._on_close = on_close
        self._icon_photo = None

        self._setup_window()
        self._setup_ui()
        self._bind_events()

    def _setup_window(self) -> None:
        """Configure the window."""
        self.title(_("app_title"))

        width, height = 460, 360
        screen_width = self.winfo_screenwidth()
        screen_height = self.winfo_screenheight()
        x = (screen_width - width) // 2
        y = (screen_height - height) // 2

        self.geometry(f"{width}x{height}+{x}+{y}")
        self.resizable(False, False)

        try:
            self._icon_photo = ImageTk.PhotoImage(create_icon_image(64))
            self.iconphoto(True, self._icon_photo)
        except Exception as e:
            logger.warning(f"Could not set window icon: {e}")

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._setup_header()
        self._setup_form()
        self._setup_footer()

    def _setup_header(self) -> None:
        """Set up the header bar."""
        header = ctk.CTkFrame(self, height=50, corner_radius=0)
        header.grid(row=0, column=0, sticky="ew")

        self._header_image = ctk.CTkImage(
            light_image=create_icon_image(64),
            dark_image=create_icon_image(64),
            size=(28, 28),
        )
        ctk.CTkLabel(header, image=self._header_image, text="").grid(
            row=0, column=0, padx=(15, 5), pady=10
        )

        ctk.CTkLabel(
            header,
            text=_("settings_header"),
            font=ctk.CTkFont(size=18, weight="bold"),
        ).grid(row=0, column=1, padx=5, pady=10, sticky="w")

    def _setup_form(self) -> None:
        """Set up the settings controls."""
        form = ctk.CTkFrame(self)
        form.grid(row=1, column=0, sticky="nsew", padx=10, pady=10)
        form.grid_columnconfigure(0, weight=1)

        # Quality
        quality_row = ctk.CTkFrame(form, fg_color="transparent")
        quality_row.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 0))
        quality_row.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            quality_row,
            text=_("quality"),
            font=ctk.CTkFont(size=14, weight="bold"),
        ).grid(row=0, column=0, sticky="w")

        self.quality_value_label = ctk.CTkLabel(quality_row, text="")
        self.quality_value_label.grid(row=0, column=1, sticky="e")

        self.quality_var = ctk.IntVar(
            value=max(QUALITY_MIN, min(QUALITY_MAX, self._settings.quality))
        )
        self.quality_slider = ctk.CTkSlider(
            form,
            from_=QUALITY_MIN,
            to=QUALITY_MAX,
            number_of_steps=QUALITY_MAX - QUALITY_MIN,
            variable=self.quality_var,
            command=self._handle_quality_change,
        )
        self.quality_slider.grid(row=1, column=0, sticky="ew", padx=10, pady=5)
        self._handle_quality_change(self.quality_var.get())

        ctk.CTkLabel(
            form,
            text=_("quality_hint"),
            font=ctk.CTkFont(size=11),
            text_color="gray",
        ).grid(row=2, column=0, sticky="w", padx=10)

        # Delete source images
        self.delete_source_var = ctk.BooleanVar(value=self._settings.delete_source_after_processing)
        ctk.CTkCheckBox(
            form,
            text=_("delete_source"),
            variable=self.delete_source_var,
        ).grid(row=3, column=0, sticky="w", padx=10, pady=15)

        # Parallel workers
        workers_row = ctk.CTkFrame(form, fg_color="transparent")
        workers_row.grid(row=4, column=0, sticky="ew", padx=10)

        ctk.CTkLabel(
            workers_row,
            text=_("worker_count"),
            font=ctk.CTkFont(size=14, weight="bold"),
        ).pack(side="left")

        self.workers_var = ctk.StringVar(value=str(self._settings.parallel_worker_count))
        ctk.CTkOptionMenu(
            workers_row,
            variable=self.workers_var,
            values=worker_choices(self._settings.parallel_worker_count),
            width=90,
        ).pack(side="right")

        ctk.CTkLabel(
            form,
            text=_("worker_count_hint"),
            font=ctk.CTkFont(size=11),
            text_color="gray",
        ).grid(row=5, column=0, sticky="w", padx=10, pady=(0, 10))

    def _setup_footer(self) -> None:
        """Set up the footer with status and buttons."""
        footer = ctk.CTkFrame(self, fg_color="transparent")
        footer.grid(row=2, column=0, sticky="ew", padx=10, pady=(0, 10))
        footer.grid_columnconfigure(0, weight=1)

        self.status_label = ctk.CTkLabel(
            footer,
            text="",
            font=ctk.CTkFont(size=11),
            text_color="gray",
            wraplength=260,
            justify="left",
        )
        self.status_label.grid(row=0, column=0, sticky="w")

        ctk.CTkButton(
            footer,
            text=_("save"),
            width=90,
            command=self._save_settings,
        ).grid(row=0, column=1, padx=5)

        ctk.CTkButton(
            footer,
            text=_("close"),
            width=90,
            fg_color=("gray70", "gray30"),
            command=self._handle_close,
        ).grid(row=0, column=2)

    def _bind_events(self) -> None:
        """Bind window events."""
        self.protocol("WM_DELETE_WINDOW", self._handle_close)

    def _handle_quality_change(self, value: float) -> None:
        """Update the quality label while the slider moves."""
        self.quality_value_label.configure(text=_("quality_value", value=int(round(value))))

    def _save_settings(self) -> None:
        """Collect the form values and save them."""
        self._settings = settings_from_form(
            self.quality_var.get(),
            self.delete_source_var.get(),
            self.workers_var.get(),
        )
        self.app.save_settings(self._settings)

    def _handle_close(self) -> None:
        """Handle window close event."""
        if self._on_close:
            self._on_close()
        else:
            self.destroy()

    def set_status(self, message: str, error: bool = False) -> None:
        """Set the status message.

        Args:
            message: The status message to display
            error: Show the message as an error
        """
        color = ("#c0392b", "#e74c3c") if error else "gray"
        self.status_label.configure(text=message, text_color=color)
