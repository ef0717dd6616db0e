"""Glyph editing session.

EditorSession holds the state of an interactive drawing session explicitly:
the selected character, the stroke being drawn, and a bounded undo history
of stroke snapshots. A host (GUI, test, script) feeds pointer samples in
and the session applies simplified strokes to the GlyphStore.
"""

import logging

from strokefont.config import SimplifyConfig
from strokefont.core.glyph_store import GlyphStore
from strokefont.core.simplify import StrokeSimplifier
from strokefont.domain import Point, Stroke
from strokefont.exceptions import NoCharacterSelectedError

logger = logging.getLogger(__name__)

CHARACTER_SET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "`~!@#$%^&*()-_=+[{]}\\|;:'\",<.>/? "
    "‘’“”—"
)

MAX_HISTORY = 50


def _snapshot(strokes: list[Stroke]) -> list[Stroke]:
    return [s.copy() for s in strokes]


class EditorSession:
    """Explicit editor state for drawing glyphs.

    Attributes:
        store: Glyph store being edited
        current_char: Selected character, or None
        current_stroke: Stroke being drawn, or None between gestures
    """

    def __init__(
        self,
        store: GlyphStore,
        simplify: SimplifyConfig | None = None,
        max_history: int = MAX_HISTORY,
    ) -> None:
        self.store = store
        self.simplifier = StrokeSimplifier(simplify)
        self.max_history = max_history
        self.current_char: str | None = None
        self.current_stroke: Stroke | None = None
        self._history: list[list[Stroke]] = []
        self._history_index = -1

    @property
    def strokes(self) -> list[Stroke]:
        """Strokes of the selected glyph (empty when nothing is selected)."""
        if self.current_char is None:
            return []
        return self.store.ensure_glyph(self.current_char).strokes

    def select(self, char: str) -> None:
        """Select a character for editing, creating its glyph if needed.

        Selecting starts a fresh undo history.
        """
        self.current_char = char
        self.current_stroke = None
        glyph = self.store.ensure_glyph(char)
        self._history = [_snapshot(glyph.strokes)]
        self._history_index = 0
        logger.debug("Selected %r", char)

    def navigate(self, direction: int) -> str:
        """Move the selection through CHARACTER_SET, wrapping at both ends.

        With nothing selected the first character is chosen.

        Returns:
            The newly selected character
        """
        if self.current_char is None or self.current_char not in CHARACTER_SET:
            char = CHARACTER_SET[0]
        else:
            index = (CHARACTER_SET.index(self.current_char) + direction) % len(CHARACTER_SET)
            char = CHARACTER_SET[index]
        self.select(char)
        return char

    # Drawing gestures

    def begin_stroke(self, point: Point) -> None:
        """Start a new stroke at `point`.

        Raises:
            NoCharacterSelectedError: If no character is selected
        """
        if self.current_char is None:
            raise NoCharacterSelectedError()
        self.current_stroke = Stroke(points=[point])

    def extend_stroke(self, point: Point) -> None:
        """Add a sampled point to the stroke being drawn."""
        if self.current_stroke is not None:
            self.current_stroke.append(point)

    def end_stroke(self) -> Stroke | None:
        """Finish the current gesture.

        Strokes of more than one point are simplified and added to the
        selected glyph; single clicks are discarded.

        Returns:
            The stored (simplified) stroke, or None if nothing was added
        """
        stroke = self.current_stroke
        self.current_stroke = None
        if stroke is None or len(stroke) < 2 or self.current_char is None:
            return None

        simplified = self.simplifier.simplify_stroke(stroke)
        self.store.add_stroke(self.current_char, simplified)
        self._push_history()
        return simplified

    def draw(self, points: list[Point]) -> Stroke | None:
        """Run a whole gesture from a list of samples."""
        if not points:
            return None
        self.begin_stroke(points[0])
        for point in points[1:]:
            self.extend_stroke(point)
        return self.end_stroke()

    # Editing

    def clear_canvas(self) -> None:
        """Remove all strokes of the selected glyph (undoable)."""
        if self.current_char is None:
            raise NoCharacterSelectedError()
        self.store.set_stroke(self.current_char, [])
        self._push_history()

    def clear_character(self) -> None:
        """Remove the selected glyph from the font and reset its history."""
        if self.current_char is None:
            raise NoCharacterSelectedError()
        if self.current_char in self.store.font.glyphs:
            self.store.remove_glyph(self.current_char)
        self._history = []
        self._history_index = -1

    # History

    @property
    def can_undo(self) -> bool:
        return self._history_index > 0

    @property
    def can_redo(self) -> bool:
        return self._history_index < len(self._history) - 1

    def undo(self) -> bool:
        """Restore the previous stroke snapshot.

        Returns:
            True if a snapshot was restored
        """
        if not self.can_undo:
            return False
        self._history_index -= 1
        self._restore()
        return True

    def redo(self) -> bool:
        """Re-apply the next stroke snapshot.

        Returns:
            True if a snapshot was restored
        """
        if not self.can_redo:
            return False
        self._history_index += 1
        self._restore()
        return True

    def _push_history(self) -> None:
        # Drawing after an undo discards the redo branch
        del self._history[self._history_index + 1 :]
        self._history.append(_snapshot(self.strokes))
        self._history_index += 1
        if len(self._history) > self.max_history:
            self._history.pop(0)
            self._history_index -= 1

    def _restore(self) -> None:
        if self.current_char is None:
            raise NoCharacterSelectedError()
        self.store.set_stroke(self.current_char, self._history[self._history_index])
