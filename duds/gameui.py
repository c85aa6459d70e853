"""An on-screen button that reacts to pointer interaction."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

Color = tuple[float, float, float]

NORMAL_BUTTON: Color = (0.15, 0.15, 0.15)
HOVERED_BUTTON: Color = (0.25, 0.25, 0.25)
PRESSED_BUTTON: Color = (0.35, 0.75, 0.35)
RED: Color = (1.0, 0.0, 0.0)
WHITE: Color = (1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0)
TEXT_COLOR: Color = (0.9, 0.9, 0.9)


class Interaction(Enum):
    """Pointer state over a button."""

    PRESSED = "pressed"
    HOVERED = "hovered"
    NONE = "none"


_LOOKS = {
    Interaction.PRESSED: ("Press", PRESSED_BUTTON, RED),
    Interaction.HOVERED: ("Hover", HOVERED_BUTTON, WHITE),
    Interaction.NONE: ("Button", NORMAL_BUTTON, BLACK),
}


@dataclass
class Button:
    """A labelled button whose look follows its interaction state."""

    text: str = "Button"
    background: Color = NORMAL_BUTTON
    border: Color = BLACK
    text_color: Color = TEXT_COLOR
    width: float = 150.0
    height: float = 65.0
    border_width: float = 5.0
    interaction: Interaction = Interaction.NONE

    def update(self, interaction: Interaction) -> None:
        """Take on the label and colours of ``interaction``."""
        self.interaction = interaction
        self.text, self.background, self.border = _LOOKS[interaction]


def button_system(
    buttons: Iterable[Button], interactions: Iterable[Interaction]
) -> list[Button]:
    """Update each button whose interaction changed; return the updated ones.

    Raises ValueError if the two sequences differ in length.
    """
    updated = []
    for button, interaction in zip(buttons, interactions, strict=True):
        if interaction != button.interaction:
            button.update(interaction)
            updated.append(button)
    return updated