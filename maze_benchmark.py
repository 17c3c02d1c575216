import random
from time import time

from maze import MazeBuilder
from maze_solver import a_star_search, dijkstra_with_goal, raster_endpoints


def run_benchmark(sizes, n=50, m=3, seed=None, backtrack="stack"):
    """
    Time maze construction and both solvers.

    :param sizes: Maze side lengths to benchmark
    :param n: Number of mazes per size
    :param m: Number of solver runs per maze
    :param seed: Seed for the sequence of mazes, for repeatable runs
    :return: {size: {"build": ms, "dijkstra": ms, "a_star": ms}} averages
    """
    rng = random.Random(seed)
    results = {}

    for maze_size in sizes:
        total_build_time = total_dijkstra_time = total_a_star_time = 0
        start, goal = raster_endpoints(maze_size)

        for _ in range(n):
            builder = MazeBuilder(maze_size, rng=rng, backtrack=backtrack)
            ts = time()
            builder.build()
            total_build_time += (time() - ts) * 1000
            maze = builder.to_array()

            for _ in range(m):
                _, dijkstra_time = dijkstra_with_goal(maze, start, goal)
                total_dijkstra_time += dijkstra_time

                _, a_star_time = a_star_search(maze, start, goal)
                total_a_star_time += a_star_time

        results[maze_size] = {
            "build": total_build_time / n,
            "dijkstra": total_dijkstra_time / (n * m),
            "a_star": total_a_star_time / (n * m),
        }

    return results


def main():
    sizes = [10, 30, 50, 100, 200]  # Maze sizes
    results = run_benchmark(sizes, n=20, m=3)

    for maze_size, averages in results.items():
        print(f"Maze size: {maze_size}x{maze_size}")
        print(f"  Build Time: {averages['build']:.2f} ms")
        print(f"  Dijkstra Time: {averages['dijkstra']:.2f} ms")
        print(f"  A* Time: {averages['a_star']:.2f} ms")

    print("Maze Sizes:", sizes)
    print("Build Times (ms):", [results[s]["build"] for s in sizes])
    print("Dijkstra Times (ms):", [results[s]["dijkstra"] for s in sizes])
    print("A* Times (ms):", [results[s]["a_star"] for s in sizes])


if __name__ == "__main__":
    main()
