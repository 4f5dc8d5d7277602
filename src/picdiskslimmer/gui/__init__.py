"""User interface (customtkinter)."""
