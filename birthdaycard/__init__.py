"""An animated birthday card: an envelope that slides in and opens to reveal a card."""

__version__ = "1.0.0"