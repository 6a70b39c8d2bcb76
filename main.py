"""
Starlings
=========

Murmuration flocking simulation with a 3D orbit viewer.

Controls:
    - Move the mouse / drag a finger: predator pulse for one frame
    - Right-drag: Rotate camera
    - W/S: Rotate camera up/down
    - A/D: Rotate camera left/right
    - Q/E: Zoom in/out
    - Mouse wheel: Zoom
    - ESC: Quit

Usage:
    python main.py                          # 32x32 grid, default zones
    python main.py --birds 2000 --seed 7
    python main.py --headless --frames 300  # run the core without a window
"""

import argparse
import time


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Starlings murmuration simulation")
    parser.add_argument("--resolution", "-r", type=int, help="Grid side length (agents = resolution^2)")
    parser.add_argument("--birds", "-n", type=int, help="Explicit agent count (overrides --resolution)")
    parser.add_argument("--separation", type=float, help="Separation zone distance")
    parser.add_argument("--alignment", type=float, help="Alignment zone distance")
    parser.add_argument("--cohesion", type=float, help="Cohesion zone distance")
    parser.add_argument("--freedom", type=float, help="Randomness factor (0-1)")
    parser.add_argument("--bounds", type=float, help="Half-width of the simulation cube")
    parser.add_argument("--seed", type=int, help="Seed for the initial flock")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument("--frames", "-f", type=int, default=600, help="Frames to run in headless mode")
    parser.add_argument("--dt", type=float, default=1.0 / 60.0, help="Frame time in headless mode")
    return parser.parse_args(argv)


def simulation_options(args) -> dict:
    keys = ("resolution", "birds", "separation", "alignment", "cohesion", "freedom", "bounds", "seed")
    return {k: getattr(args, k) for k in keys if getattr(args, k) is not None}


def run_headless(options: dict, frames: int, dt: float):
    from starlings import Starlings

    sim = Starlings(**options)
    start = time.perf_counter()
    try:
        for _ in range(frames):
            sim.tick(dt)
        elapsed = time.perf_counter() - start
        fps = frames / elapsed if elapsed > 0 else float("inf")
        print(f"[Headless] {frames:,} frames in {elapsed:.2f}s ({fps:.1f} FPS), "
              f"sim clock {sim.state().clock:.2f}s")
    finally:
        sim.stop()


def main(argv=None):
    args = parse_args(argv)
    options = simulation_options(args)

    if args.headless:
        run_headless(options, args.frames, args.dt)
        return

    from core import Application

    app = Application(**options)
    app.run()


if __name__ == "__main__":
    main()
