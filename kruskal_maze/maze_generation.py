import logging
import numbers
from collections import namedtuple
from operator import attrgetter

import numpy as np

from .unionfind import UnionFind


logger = logging.getLogger(__name__)


# A candidate wall opening between adjacent cells u and v. Horizontal edges
# join (row, col) to (row, col + 1) and control vertical_walls[row, col];
# vertical edges join (row, col) to (row + 1, col) and control
# horizontal_walls[row, col].
Edge = namedtuple('Edge', ['u', 'v', 'weight', 'horizontal', 'row', 'col'])

MazeWalls = namedtuple('MazeWalls', ['horizontal_walls', 'vertical_walls'])


def validate_maze_size(maze_size):
    """Checks that maze_size is an integer of at least 1.

    Parameters:
    maze_size (int): Number of cells along one side of the maze.

    Return:
    (int): maze_size as a plain int.
    """
    if isinstance(maze_size, bool) or \
            not isinstance(maze_size, numbers.Integral):
        raise TypeError('maze_size must be an integer, got %r'
                        % (maze_size,))
    if maze_size < 1:
        raise ValueError('maze_size must be at least 1, got %d' % maze_size)
    return int(maze_size)


def make_rng(seed=None, rng=None):
    """Returns the random source used to weight edges.

    Parameters:
    seed (int or None): Seed for numpy.random.default_rng.
    rng (numpy Generator or None): Ready made generator.

    Return:
    (numpy Generator): rng if given, otherwise a generator seeded
    with seed.
    """
    if rng is not None:
        if seed is not None:
            raise ValueError('Give either seed or rng, not both')
        return rng
    return np.random.default_rng(seed)


def cell_index(row, col, maze_size):
    return row * maze_size + col


def enumerate_edges(maze_size, rng):
    """Creates one edge per pair of adjacent cells, each with an
    independent uniform weight in [0, 1). All horizontal pairs come
    first, row by row, then all vertical pairs.

    Parameters:
    maze_size (int): Number of cells along one side of the maze.
    rng (numpy Generator): Random source for the weights.

    Return:
    edges (list(Edge)): 2 * maze_size * (maze_size - 1) edges in
    creation order.
    """
    weights = iter(rng.random(2 * maze_size * (maze_size - 1)))
    edges = []
    for row in range(maze_size):
        for col in range(maze_size - 1):
            edges.append(Edge(cell_index(row, col, maze_size),
                              cell_index(row, col + 1, maze_size),
                              float(next(weights)), True, row, col))
    for row in range(maze_size - 1):
        for col in range(maze_size):
            edges.append(Edge(cell_index(row, col, maze_size),
                              cell_index(row + 1, col, maze_size),
                              float(next(weights)), False, row, col))
    return edges


def sort_edges(edges):
    """Sorts edges ascending by weight. The sort is stable so equal
    weights keep their creation order.
    """
    return sorted(edges, key=attrgetter('weight'))


def assemble_walls(maze_size, edges):
    """Greedily opens walls in the given edge order, skipping any edge
    whose cells are already connected (Kruskal's algorithm).

    Parameters:
    maze_size (int): Number of cells along one side of the maze.
    edges (list(Edge)): Edges in the order they should be tried.

    Return:
    (MazeWalls): Horizontal and vertical wall grids, True where a wall
    is still present.
    """
    cells = UnionFind(maze_size * maze_size)
    horizontal_walls = np.ones((maze_size - 1, maze_size), dtype=bool)
    vertical_walls = np.ones((maze_size, maze_size - 1), dtype=bool)

    opened = 0
    for edge in edges:
        if not cells.union(edge.u, edge.v):
            continue
        if edge.horizontal:
            vertical_walls[edge.row, edge.col] = False
        else:
            horizontal_walls[edge.row, edge.col] = False
        opened += 1

    logger.debug('Opened %d of %d walls', opened, len(edges))
    return MazeWalls(horizontal_walls, vertical_walls)


def generate_maze(maze_size, seed=None, rng=None):
    """Generates a perfect maze with randomized Kruskal's algorithm.

    Parameters:
    maze_size (int): Number of cells along one side of the maze.
    seed (int or None): Seed for the random source. The same seed and
    maze_size always give the same walls.
    rng (numpy Generator or None): Random source to use instead of
    seed.

    Return:
    (MazeWalls): horizontal_walls of shape (maze_size - 1, maze_size),
    where entry [r, c] is the wall between cells (r, c) and (r + 1, c),
    and vertical_walls of shape (maze_size, maze_size - 1), where entry
    [r, c] is the wall between cells (r, c) and (r, c + 1). True means
    the wall is present.
    """
    maze_size = validate_maze_size(maze_size)
    rng = make_rng(seed, rng)

    edges = sort_edges(enumerate_edges(maze_size, rng))
    logger.debug('Generating %dx%d maze from %d candidate edges',
                 maze_size, maze_size, len(edges))
    return assemble_walls(maze_size, edges)


def maze_size_of(walls):
    """Returns the number of cells along one side of a maze, checking
    that both wall grids agree on it.
    """
    horizontal_walls, vertical_walls = walls
    maze_size = vertical_walls.shape[0]
    if horizontal_walls.shape != (maze_size - 1, maze_size) or \
            vertical_walls.shape != (maze_size, maze_size - 1):
        raise ValueError('Wall grids of shapes %s and %s do not describe a '
                         'square maze' % (horizontal_walls.shape,
                                          vertical_walls.shape))
    return maze_size


def open_passages(walls):
    """Lists the opened walls as pairs of cell indices.

    Parameters:
    walls (MazeWalls): Wall grids as returned by generate_maze.

    Return:
    passages (list(tuple)): (cell, cell) pairs, openings in
    horizontal_walls first, then openings in vertical_walls.
    """
    maze_size = maze_size_of(walls)
    horizontal_walls, vertical_walls = walls
    passages = [
        (cell_index(row, col, maze_size), cell_index(row + 1, col, maze_size))
        for row, col in np.argwhere(np.logical_not(horizontal_walls))
    ]
    passages += [
        (cell_index(row, col, maze_size), cell_index(row, col + 1, maze_size))
        for row, col in np.argwhere(np.logical_not(vertical_walls))
    ]
    return [(int(u), int(v)) for u, v in passages]


def is_perfect_maze(walls):
    """Checks whether the open passages form a spanning tree of the
    cell grid: every cell reachable and no cycles.

    Parameters:
    walls (MazeWalls): Wall grids as returned by generate_maze.

    Return:
    (bool): Whether walls describe a perfect maze.
    """
    try:
        maze_size = maze_size_of(walls)
    except ValueError:
        return False

    passages = open_passages(walls)
    if len(passages) != maze_size * maze_size - 1:
        return False

    cells = UnionFind(maze_size * maze_size)
    for u, v in passages:
        if not cells.union(u, v):
            logger.debug('Passage %d-%d closes a cycle', u, v)
            return False
    return len(cells.groups()) == 1
