"""Status bar renderer."""
from __future__ import annotations

import pygame

from ui.constants import STATUS_BG, STATUS_H, TEXT_COLOR


def draw_status_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    offset: float,
    angle: float,
    mode: str,
) -> None:
    """Draw the bottom status bar with the current sample."""
    width, height = surface.get_size()
    y = height - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, width, STATUS_H))
    text = f"mode: {mode}   offset: {offset:0.3f}   heading: {angle:+0.2f} rad   Esc: quit"
    label = font.render(text, True, TEXT_COLOR)
    surface.blit(label, (8, y + (STATUS_H - label.get_height()) // 2))
