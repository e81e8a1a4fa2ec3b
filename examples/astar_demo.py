from astar_engine import PathNotFoundError, SearchConfig, find_path

width, height = 10, 10
start = (0, 0)
goal = (5, 2)  # keep within demo bounds

blocked = {(1, 0), (2, 1), (3, 1)}


def moves(cell):
    x, y = cell
    for cx, cy in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
        if 0 <= cx < width and 0 <= cy < height and (cx, cy) not in blocked:
            yield (cx, cy)


def manhattan(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


if __name__ == "__main__":
    config = SearchConfig(cost_function=manhattan, move_function=moves, start=start, end=goal)
    try:
        path = find_path(config)
    except PathNotFoundError as exc:
        print("no path:", exc)
    else:
        print("path:", path)
        print("hops:", len(path))
