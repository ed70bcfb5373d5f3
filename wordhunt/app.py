from __future__ import annotations

import sys
from typing import Dict, Optional, Tuple

import pygame

from .config import CFG
from .constants import *  # noqa: F401,F403
from .game import GameController
from .input_queue import InputQueue
from .layout import GridLayout
from .models import GamePhase, GameView

WINDOWED_FLAGS = pygame.RESIZABLE


class App:
    """pygame window around a ``GameController``: keys, clicks and drawing."""

    def __init__(self, screen: pygame.Surface, game: GameController) -> None:
        self.screen = screen
        self.game = game
        self.clock = pygame.time.Clock()
        self.fullscreen = bool(CFG["display"].get("fullscreen", False))
        self.last_windowed_size = tuple(CFG["display"].get("windowed_size", WINDOWED_DEFAULT_SIZE))

        self.key_to_command: Dict[int, str] = {
            pygame.K_UP: "UP", pygame.K_DOWN: "DOWN", pygame.K_LEFT: "LEFT", pygame.K_RIGHT: "RIGHT",
            pygame.K_w: "UP",  pygame.K_s: "DOWN",    pygame.K_a: "LEFT",    pygame.K_d: "RIGHT",
            pygame.K_SPACE: "SELECT",
        }

        self._font_cache: dict[int, pygame.font.Font] = {}
        self.w, self.h = self.screen.get_size()
        self.layout: Optional[GridLayout] = None
        self._recompute_layout()

    # ---- Window / layout ----

    def _font(self, px: int) -> pygame.font.Font:
        size = max(8, int(round(px * self.ui_scale)))
        f = self._font_cache.get(size)
        if f is None:
            try:
                f = pygame.font.SysFont(FONT_NAMES, size, bold=True)
            except Exception:
                f = pygame.font.Font(None, size)
            self._font_cache[size] = f
        return f

    def _recompute_layout(self) -> None:
        self.w, self.h = self.screen.get_size()
        self.ui_scale = max(0.6, min(2.0, min(self.w / 720, self.h / 900)))
        self._font_cache.clear()
        pad = int(min(self.w, self.h) * PADDING)
        top = int(self.h * HEADER_H_FACTOR)
        size = len(self.game.grid) or self.game.rules.initial_size
        area = (pad, top, self.w - 2 * pad, self.h - top - pad * 2)
        self.layout = GridLayout.fit(area, size)

    def _set_display_mode(self, fullscreen: bool) -> None:
        self.fullscreen = fullscreen
        if fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(self.last_windowed_size, WINDOWED_FLAGS)
        pygame.display.set_caption(CAPTION)
        self._recompute_layout()

    def handle_resize(self, width: int, height: int) -> None:
        if self.fullscreen:
            return
        self.last_windowed_size = (max(200, width), max(200, height))
        self.screen = pygame.display.set_mode(self.last_windowed_size, WINDOWED_FLAGS)
        self._recompute_layout()

    # ---- Input ----

    def handle_event(self, event: pygame.event.Event, iq: InputQueue) -> None:
        if event.type == pygame.VIDEORESIZE:
            self.handle_resize(event.w, event.h)
            return

        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_q):
                self.game.close()
                pygame.quit(); sys.exit(0)

            if event.key == pygame.K_F11:
                self._set_display_mode(not self.fullscreen)
                return

            phase = self.game.phase
            if event.key == pygame.K_RETURN or (phase is GamePhase.GAME_OVER and event.key == pygame.K_SPACE):
                if phase is not GamePhase.PLAYING:
                    iq.push("START")
                return

            name = self.key_to_command.get(event.key)
            if name and phase is GamePhase.PLAYING:
                iq.push(name)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.game.phase is GamePhase.PLAYING and self.layout is not None:
                cell = self.layout.cell_at(*event.pos)
                if cell is not None:
                    self.game.activate_cell(*cell)

    def update(self, iq: InputQueue) -> None:
        self.game.update(iq)
        size = len(self.game.grid)
        if size and (self.layout is None or self.layout.size != size):
            self._recompute_layout()

    # ---- Rendering ----

    def _draw_round_rect(self, rect: pygame.Rect, fill, border=None, border_w=1, radius=UI_RADIUS) -> None:
        rr = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
        pygame.draw.rect(rr, fill, rr.get_rect(), border_radius=radius)
        if border is not None and border_w > 0:
            pygame.draw.rect(rr, border, rr.get_rect(), width=border_w, border_radius=radius)
        self.screen.blit(rr, rect.topleft)

    def draw_text(self, text: str, *, center: Tuple[int, int], size_px: int, color=INK, shadow=True) -> pygame.Rect:
        font = self._font(size_px)
        base = font.render(text, True, color)
        rect = base.get_rect(center=center)
        if shadow:
            sh = font.render(text, True, (0, 0, 0))
            dx, dy = TEXT_SHADOW_OFFSET
            self.screen.blit(sh, rect.move(dx, dy))
        self.screen.blit(base, rect)
        return rect

    def _draw_word(self, view: GameView, y: int) -> None:
        font = self._font(HUD_FONT_SIZE)
        parts = [font.render(ch, True, LETTER_FOUND if found else LETTER_PENDING) for ch, found in view.letter_marks]
        label = font.render("Word: ", True, INK)
        total = label.get_width() + sum(p.get_width() for p in parts)
        x = (self.w - total) // 2
        self.screen.blit(label, (x, y))
        x += label.get_width()
        for surf in parts:
            self.screen.blit(surf, (x, y))
            x += surf.get_width()

    def _draw_hud(self, view: GameView) -> None:
        y = int(self.h * 0.04)
        self.draw_text(TITLE, center=(self.w // 2, y + 20), size_px=TITLE_FONT_SIZE)
        y += int(60 * self.ui_scale)
        if view.phase is GamePhase.PLAYING:
            self._draw_word(view, y)
            y += int(40 * self.ui_scale)
            stats = f"Score: {view.score}   Grid: {view.grid_size}x{view.grid_size}   Speed: {view.shuffle_speed}"
            self.draw_text(stats, center=(self.w // 2, y + 12), size_px=SMALL_FONT_SIZE, color=MUTED, shadow=False)
            y += int(34 * self.ui_scale)
        if view.message:
            font = self._font(SMALL_FONT_SIZE)
            surf = font.render(view.message, True, INK)
            rect = surf.get_rect(center=(self.w // 2, y + 16)).inflate(24, 12)
            color = NOTICE_COLORS.get(view.notice_kind.value if view.notice_kind else "", ACCENT)
            self._draw_round_rect(rect, color)
            self.screen.blit(surf, surf.get_rect(center=rect.center))

    def _draw_grid(self, view: GameView) -> None:
        layout = self.layout
        if layout is None or not view.grid:
            return
        panel = pygame.Rect(layout.left - 10, layout.top - 10, layout.span + 20, layout.span + 20)
        self._draw_round_rect(panel, PANEL_BG)

        font = self._font(max(10, int(layout.cell * 0.6 / self.ui_scale)))
        hover = layout.cell_at(*pygame.mouse.get_pos()) if pygame.mouse.get_focused() else None
        for r, row in enumerate(view.grid):
            for c, ch in enumerate(row):
                rect = pygame.Rect(layout.cell_rect(r, c))
                color = GRID_INK
                if (r, c) == view.cursor:
                    fill = CURSOR_BLINK_FILL if view.blink else CURSOR_FILL
                    pygame.draw.rect(self.screen, fill, rect)
                    pygame.draw.rect(self.screen, CURSOR_BORDER, rect, width=1)
                    color = INK
                elif (r, c) == hover:
                    pygame.draw.rect(self.screen, CELL_HOVER, rect)
                surf = font.render(ch, True, color)
                self.screen.blit(surf, surf.get_rect(center=rect.center))

    def _draw_menu(self) -> None:
        self.draw_text("Press ENTER to start", center=(self.w // 2, self.h // 2), size_px=HUD_FONT_SIZE, color=ACCENT)
        self.draw_text("Arrows/WASD move, SPACE selects, click a letter", center=(self.w // 2, self.h // 2 + 50),
                       size_px=SMALL_FONT_SIZE, color=MUTED, shadow=False)

    def _draw_game_over(self, view: GameView) -> None:
        y = self.h - int(self.h * 0.12)
        self.draw_text(f"Game over! You found {view.score} words.", center=(self.w // 2, y),
                       size_px=HUD_FONT_SIZE, color=(239, 68, 68))
        self.draw_text("ENTER or SPACE to play again", center=(self.w // 2, y + 40),
                       size_px=SMALL_FONT_SIZE, color=MUTED, shadow=False)

    def draw(self) -> None:
        view = self.game.view()
        self.screen.fill(BG)
        self._draw_hud(view)
        if view.phase is GamePhase.NOT_STARTED:
            self._draw_menu()
        else:
            self._draw_grid(view)
        if view.phase is GamePhase.GAME_OVER:
            self._draw_game_over(view)
        pygame.display.flip()


__all__ = ["App"]
