"""Theme and styling configuration for the GUI."""

import customtkinter as ctk


# Set appearance mode and color theme
ctk.set_appearance_mode("dark")
ctk.set_default_color_theme("blue")


class Colors:
    """Color palette for the application."""

    # Primary colors
    PRIMARY = "#1f6aa5"
    PRIMARY_HOVER = "#144870"
    SECONDARY = "#2b2b2b"

    # Background colors
    BG_DARK = "#1a1a1a"
    BG_MEDIUM = "#242424"
    BG_LIGHT = "#2b2b2b"
    BG_CARD = "#333333"

    # Text colors
    TEXT_PRIMARY = "#ffffff"
    TEXT_SECONDARY = "#b0b0b0"
    TEXT_MUTED = "#808080"

    DANGER = "#dc3545"

    # Status colors
    STATUS_OPEN = "#17a2b8"
    STATUS_PROGRESS = "#ffc107"
    STATUS_OFFER = "#28a745"
    STATUS_CLOSED = "#6c757d"


class Fonts:
    """Font configurations."""

    FAMILY = "Segoe UI"

    # Sizes
    SIZE_SMALL = 11
    SIZE_NORMAL = 13
    SIZE_LARGE = 18

    @classmethod
    def get(cls, size: str = "normal", weight: str = "normal") -> tuple:
        """Get a font tuple for CustomTkinter."""
        sizes = {
            "small": cls.SIZE_SMALL,
            "normal": cls.SIZE_NORMAL,
            "large": cls.SIZE_LARGE,
        }
        return (cls.FAMILY, sizes.get(size, cls.SIZE_NORMAL), weight)


class Spacing:
    """Spacing constants."""

    PADDING_SMALL = 5
    PADDING_NORMAL = 10
    PADDING_LARGE = 20


class Dimensions:
    """Size constants."""

    # Window
    WINDOW_MIN_WIDTH = 900
    WINDOW_MIN_HEIGHT = 600
    WINDOW_DEFAULT_WIDTH = 1200
    WINDOW_DEFAULT_HEIGHT = 760

    CARD_CORNER_RADIUS = 10

    # Buttons
    BUTTON_HEIGHT = 36
    BUTTON_CORNER_RADIUS = 8

    # Input fields
    INPUT_HEIGHT = 36
    INPUT_CORNER_RADIUS = 6
    NOTES_HEIGHT = 80


def get_status_color(status_name: str) -> str:
    """Get the badge color for a status name."""
    colors = {
        "Applied": Colors.STATUS_OPEN,
        "Acknowledged": Colors.STATUS_OPEN,
        "Contacted": Colors.STATUS_PROGRESS,
        "Interviewing": Colors.STATUS_PROGRESS,
        "Offer": Colors.STATUS_OFFER,
        "Accepted": Colors.STATUS_OFFER,
        "Rejected": Colors.STATUS_CLOSED,
    }
    return colors.get(status_name, Colors.TEXT_MUTED)
