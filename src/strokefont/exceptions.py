"""Exception hierarchy for Strokefont."""


class StrokeFontError(Exception):
    """Base exception for all Strokefont errors."""

    pass


class FontError(StrokeFontError):
    """Errors related to font loading or saving."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontSaveError(FontError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")


class FontFormatError(FontError):
    """Unsupported or invalid font format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class GlyphError(StrokeFontError):
    """Errors related to glyph editing."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested character has no glyph in the font."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Glyph for {char!r} not found in font")


class InvalidAdvanceError(GlyphError):
    """Advance width rejected (must be positive)."""

    def __init__(self, char: str, width: float) -> None:
        self.char = char
        self.width = width
        super().__init__(f"Invalid advance width {width} for {char!r}: must be > 0")


class KerningRuleError(StrokeFontError):
    """Kerning rule rejected at the point of addition."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid kerning rule: {reason}")


class SessionError(StrokeFontError):
    """Errors in the interactive editing session."""

    pass


class NoCharacterSelectedError(SessionError):
    """A drawing operation was attempted without a selected character."""

    def __init__(self) -> None:
        super().__init__("Please select a character first")


class ExportError(StrokeFontError):
    """Errors that abort an export before any output is written."""

    pass


class EmptyFontError(ExportError):
    """The font has no glyphs to draw with."""

    def __init__(self) -> None:
        super().__init__("No characters in font. Please draw some characters first.")


class EmptyTextError(ExportError):
    """There is no text to export."""

    def __init__(self) -> None:
        super().__init__("Please enter text to export")


class UnsupportedFormatError(ExportError):
    """No exporter is registered for the requested output format."""

    def __init__(self, suffix: str) -> None:
        self.suffix = suffix
        super().__init__(f"Unsupported output format: '{suffix}'")
