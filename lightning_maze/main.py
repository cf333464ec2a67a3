import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'lightning_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lightning_maze.core.errors import MazeError
from lightning_maze.core.maze import DEFAULT_HEIGHT, DEFAULT_WIDTH

def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lightning Maze: perfect maze generator and solver")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run Command
    run_parser = subparsers.add_parser("run", help="Generate a maze and solve it top to bottom")
    run_parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Maze Width")
    run_parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Maze Height")
    run_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    run_parser.add_argument("--start-x", type=int, default=None, help="Start column on the top row (random if omitted)")
    run_parser.add_argument("--end-x", type=int, default=None, help="End column on the bottom row (random if omitted)")
    run_parser.add_argument("--path-only", action="store_true", help="Print only the path coordinates")

    # Stats Command
    stats_parser = subparsers.add_parser("stats", help="Generate a maze and report its structure")
    stats_parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="Maze Width")
    stats_parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="Maze Height")
    stats_parser.add_argument("--seed", type=int, default=None, help="Random Seed")

    # Benchmark Command
    bench_parser = subparsers.add_parser("benchmark", help="Time generation and solving")
    bench_parser.add_argument("--size", type=int, default=200, help="Benchmark size")
    bench_parser.add_argument("--seed", type=int, default=123, help="Random Seed")

    return parser

def cmd_run(args, logger):
    from lightning_maze.core.maze import Maze

    logger.info(f"Generating {args.width}x{args.height} maze...")
    maze = Maze(args.width, args.height, seed=args.seed, start_x=args.start_x, end_x=args.end_x)
    logger.info(f"Solved {maze.start} -> {maze.end}: {len(maze.path)} cells")

    if not args.path_only:
        print(f"Maze {maze.width}x{maze.height} start={tuple(maze.start)} end={tuple(maze.end)}")
    for x, y in maze.path:
        print(f"{x} {y}")

def cmd_stats(args, logger):
    from lightning_maze.core.maze import Maze
    from lightning_maze.core.analysis import MazeInspector

    maze = Maze(args.width, args.height, seed=args.seed)
    stats = MazeInspector.calculate_stats(maze.grid)
    logger.info(f"Stats: {stats}")

    print(f"{'METRIC':<18} | VALUE")
    print("-" * 30)
    for key, value in stats.items():
        if isinstance(value, float):
            print(f"{key:<18} | {value:.2f}")
        else:
            print(f"{key:<18} | {value}")
    print(f"{'perfect':<18} | {MazeInspector.is_perfect(maze.grid)}")
    print(f"{'path_length':<18} | {len(maze.path)}")

def cmd_benchmark(args, logger):
    import random
    from lightning_maze.core.grid import Grid
    from lightning_maze.algo.dfs import RecursiveBacktracker
    from lightning_maze.algo.solvers import DepthFirstSolver

    logger.info(f"Running benchmark (Size: {args.size}x{args.size})...")

    t0 = time.time()
    grid = Grid(args.size, args.size)
    gen = RecursiveBacktracker(grid, start=(0, 0), rng=random.Random(args.seed))
    gen.run_all()
    gen_time = time.time() - t0

    start_pos = (0, 0)
    end_pos = (grid.width - 1, grid.height - 1)
    solver = DepthFirstSolver(grid)
    t1 = time.time()
    solver.run_all(start_pos, end_pos)
    solve_time = time.time() - t1

    cells = grid.width * grid.height
    print(f"\n{'STAGE':<12} | {'TIME (s)':<10} | {'CELLS/S':<12} | {'DETAIL':<20}")
    print("-" * 62)
    print(f"{'generate':<12} | {gen_time:<10.4f} | {cells / max(gen_time, 1e-9):<12,.0f} | {gen.step_count} passages")
    print(f"{'solve':<12} | {solve_time:<10.4f} | {solver.visited_count / max(solve_time, 1e-9):<12,.0f} | path {len(solver.path)}, visited {solver.visited_count}")

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("lightning_maze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    try:
        if args.command == "run":
            cmd_run(args, logger)
        elif args.command == "stats":
            cmd_stats(args, logger)
        elif args.command == "benchmark":
            cmd_benchmark(args, logger)
    except MazeError as e:
        logger.error(str(e))
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
