"""Bounce Demo - a bar whose height bounces with decaying amplitude.

Exercises cadence, cadence-tween and cadence-bounce.

Controls:
  Space   Start a bounce (cancels the running one)
  +/-     Adjust the first bounce height
  D       Toggle decay between 10px and 30px
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from cadence import Timers
from cadence_bounce import BounceConfig, BounceHandle, BouncePass, start_bounce
from cadence_tween import StyleSink

FPS = 60
SCREEN_W = 480
SCREEN_H = 360
FLOOR_Y = SCREEN_H - 40
BAR_W = 60

BG_COLOR = (20, 20, 30)
FLOOR_COLOR = (60, 60, 80)
BAR_RISE = (110, 200, 140)
BAR_FALL = (220, 120, 100)
BAR_IDLE = (128, 128, 128)
TEXT_COLOR = (200, 200, 210)


class Element:
    """Minimal styled element: the sink writes into `style`."""

    def __init__(self) -> None:
        self.style: dict[str, str] = {"height": "0px"}

    def height(self) -> int:
        return int(float(self.style["height"].removesuffix("px")))


class DemoState:
    def __init__(self) -> None:
        self.timers = Timers()
        self.bar = Element()
        self.amplitude = 200
        self.decay = 30
        self.bounce: BounceHandle | None = None
        self.current_pass: BouncePass | None = None
        self.finished = 0

    def start(self) -> None:
        if self.bounce is not None:
            self.bounce.cancel()
        config = BounceConfig(
            passes=2 * (self.amplitude // self.decay),
            amplitude_end=self.amplitude,
            amplitude_decay=self.decay,
            step=4,
            tick_period=8,
        )
        self.bounce = start_bounce(
            self.timers,
            StyleSink(self.bar, "height"),
            config,
            on_pass=self._on_pass,
            on_all_complete=self._on_all_complete,
        )

    def _on_pass(self, bounce_pass: BouncePass) -> None:
        self.current_pass = bounce_pass

    def _on_all_complete(self, handle: BounceHandle) -> None:
        self.current_pass = None
        self.finished += 1


def draw(screen: pygame.Surface, font: pygame.font.Font, state: DemoState) -> None:
    screen.fill(BG_COLOR)
    pygame.draw.line(screen, FLOOR_COLOR, (0, FLOOR_Y), (SCREEN_W, FLOOR_Y), 2)

    if state.current_pass is None:
        color = BAR_IDLE
    elif state.current_pass.direction == "rise":
        color = BAR_RISE
    else:
        color = BAR_FALL

    height = state.bar.height()
    rect = pygame.Rect((SCREEN_W - BAR_W) // 2, FLOOR_Y - height, BAR_W, height)
    pygame.draw.rect(screen, color, rect)

    lines = [
        f"height  {state.bar.style['height']}",
        f"first   {state.amplitude}px  decay {state.decay}px",
        f"bounces {state.finished}",
    ]
    if state.current_pass is not None:
        lines.append(
            f"pass    {state.current_pass.index} {state.current_pass.direction}"
            f" (to {state.current_pass.end})"
        )
    for i, line in enumerate(lines):
        screen.blit(font.render(line, True, TEXT_COLOR), (12, 10 + i * 16))


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Bounce Demo - cadence-bounce")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = DemoState()
    running = True

    while running:
        # Frame time drives the virtual timer clock.
        elapsed_ms = clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.start()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    state.amplitude = min(state.amplitude + 40, FLOOR_Y - 40)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    state.amplitude = max(state.amplitude - 40, 40)
                elif event.key == pygame.K_d:
                    state.decay = 10 if state.decay == 30 else 30

        state.timers.advance(elapsed_ms)

        draw(screen, font, state)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
