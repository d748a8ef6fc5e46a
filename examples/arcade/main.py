"""
tick-timers Arcade
Interactive pygame demo: a round countdown, a fixed spawn pulse, sporadic
flashes and a lap stopwatch, all driven from one TimerRegistry.
"""

import random
import sys
from dataclasses import dataclass

import pygame

from tick_timers import (
    CountdownTimer,
    FrequencyTimer,
    ManualClock,
    SporadicTimer,
    StopwatchTimer,
    TimerRegistry,
)

# --- Configuration ---
WIDTH, HEIGHT = 800, 600
FPS = 60
TITLE = "tick-timers Arcade"

ROUND_SECONDS = 30.0
SPAWN_EVERY = 0.75
FLASH_MIN, FLASH_MAX = 0.5, 2.5
ORB_RADIUS = 14
MAX_ORBS = 40

# Colors
BG_COLOR = (26, 26, 46)
HUD_COLOR = (200, 200, 220)
BAR_COLOR = (0, 255, 100)
BAR_BG_COLOR = (60, 60, 80)
FLASH_COLOR = (255, 215, 0)
ORB_COLORS = [
    (0, 255, 255),    # cyan
    (255, 0, 200),    # magenta
    (255, 160, 0),    # orange
    (180, 100, 255),  # violet
]


@dataclass
class Orb:
    x: float
    y: float
    color: tuple[int, int, int]


def main():
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    # --- Timer setup ---
    clock = ManualClock()
    registry = TimerRegistry(clock=clock)

    round_timer = CountdownTimer(registry, ROUND_SECONDS)
    spawner = FrequencyTimer(registry, SPAWN_EVERY)
    flasher = SporadicTimer(registry, FLASH_MIN, FLASH_MAX)
    watch = StopwatchTimer(registry)

    orbs: list[Orb] = []
    flash = [0]

    @spawner.on_tick.subscribe
    def spawn_orb():
        if len(orbs) < MAX_ORBS:
            orbs.append(Orb(
                x=random.uniform(40, WIDTH - 40),
                y=random.uniform(120, HEIGHT - 40),
                color=random.choice(ORB_COLORS),
            ))

    @flasher.on_tick.subscribe
    def start_flash():
        flash[0] = 8

    @round_timer.on_stop.subscribe
    def end_round():
        spawner.stop()
        flasher.stop()
        watch.add_lap()
        watch.pause()

    def new_round():
        orbs.clear()
        for timer in (round_timer, spawner, flasher, watch):
            timer.close()
        round_timer.start()
        spawner.start()
        flasher.start()
        watch.start()

    new_round()
    running = True

    while running:
        clock.advance(pg_clock.tick(FPS) / 1000.0)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    if round_timer.is_running:
                        for timer in (round_timer, spawner, flasher, watch):
                            timer.pause()
                    elif round_timer.is_paused:
                        for timer in (round_timer, spawner, flasher, watch):
                            timer.resume()
                elif event.key == pygame.K_l:
                    watch.add_lap()
                elif event.key == pygame.K_r:
                    new_round()

        # --- Update ---
        registry.advance_all()

        # --- Draw ---
        screen.fill(FLASH_COLOR if flash[0] > 0 else BG_COLOR)
        if flash[0] > 0:
            flash[0] -= 1

        for orb in orbs:
            pygame.draw.circle(screen, orb.color, (int(orb.x), int(orb.y)), ORB_RADIUS)

        bar = pygame.Rect(10, 60, WIDTH - 20, 12)
        pygame.draw.rect(screen, BAR_BG_COLOR, bar)
        filled = bar.copy()
        filled.width = int(bar.width * (1.0 - round_timer.progress))
        pygame.draw.rect(screen, BAR_COLOR, filled)

        # --- HUD ---
        state = round_timer.state.value.upper()
        lap = watch.current_lap
        hud_lines = [
            f"Round: {max(round_timer.current_time, 0.0):5.1f}s  [{state}]   "
            f"Stopwatch: {watch.current_time:6.2f}s   Orbs: {len(orbs)}",
            f"Last: {lap if lap is not None else '-'}",
            "Space=Pause/Resume  L=Lap  R=Restart  Esc=Quit",
        ]
        for i, line in enumerate(hud_lines):
            surf = font.render(line, True, HUD_COLOR)
            screen.blit(surf, (10, 8 + i * 16))

        pygame.display.flip()

    registry.clear_all()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
