import logging
from collections import namedtuple
import numpy as np

from .maze_generation import generate_maze, validate_maze_size
from .rasterization import (check_texture_size, rasterize_maze,
                            DEFAULT_TEXTURE_SIZE, WALL_COLOR)


logger = logging.getLogger(__name__)

DEFAULT_BLOCK_SIZE = 1.0

# One solid cube, positioned by its centre.
Block = namedtuple('Block', ['x', 'y', 'z', 'size'])

# The flat walkable surface under the whole maze.
GroundPlane = namedtuple('GroundPlane', ['width', 'depth', 'center'])


def sample_points(maze_size, texture_size):
    """Returns the pixel offsets sampled for each band of a texture
    side, i.e. the floored centre of every band.
    """
    check_texture_size(maze_size, texture_size)
    bands = 2 * maze_size + 1
    cell_px = texture_size / bands
    return np.floor(np.arange(bands) * cell_px + cell_px / 2).astype(int)


def sample_occupancy(texture, maze_size, wall_color=WALL_COLOR):
    """Samples a maze texture once per sub-cell to decide which
    sub-cells are solid.

    Parameters:
    texture (numpy array): Square texture as returned by rasterize_maze.
    maze_size (int): Number of cells along one side of the maze.
    wall_color (int): Gray level that marks a wall.

    Return:
    (numpy array): Boolean array of shape
    (2 * maze_size + 1, 2 * maze_size + 1), True where the sub-cell is
    a wall.
    """
    texture = np.asarray(texture)
    height, width = texture.shape[:2]
    if height != width:
        raise ValueError('Texture must be square, got %dx%d' % (width, height))
    points = sample_points(maze_size, width)
    samples = texture[np.ix_(points, points)]
    if samples.ndim == 3:
        samples = samples[..., 0]
    return samples == wall_color


def tile_blocks(texture, maze_size, block_size=DEFAULT_BLOCK_SIZE,
                wall_color=WALL_COLOR):
    """Converts every solid sub-cell of a maze texture into one block.
    Sub-cell (r, c) becomes a block centred at
    (c - maze_size, block_size / 2, r - maze_size), so the maze is
    centred on the origin and the blocks stand on the ground plane.

    Parameters:
    texture (numpy array): Square texture as returned by rasterize_maze.
    maze_size (int): Number of cells along one side of the maze.
    block_size (float): Edge length of each block.
    wall_color (int): Gray level that marks a wall.

    Return:
    blocks (list(Block)): Blocks in row major order of the sub-cells.
    """
    occupancy = sample_occupancy(texture, maze_size, wall_color)
    blocks = [
        Block(float(col - maze_size), block_size / 2,
              float(row - maze_size), block_size)
        for row, col in np.argwhere(occupancy)
    ]
    logger.debug('Tiled %d blocks over %d sub-cells',
                 len(blocks), occupancy.size)
    return blocks


def ground_plane(maze_size):
    """Returns the ground plane spanning a maze of maze_size cells."""
    side = 2 * maze_size + 1
    return GroundPlane(side, side, (0.0, 0.0, 0.0))


def build_maze_scene(maze_size, seed=None, texture_size=DEFAULT_TEXTURE_SIZE,
                     block_size=DEFAULT_BLOCK_SIZE):
    """Generates a maze and everything needed to instantiate it: the
    wall grids, their texture, the solid blocks and the ground plane.
    Every call starts from scratch.

    Parameters:
    maze_size (int): Number of cells along one side of the maze.
    seed (int or None): Seed for the random source.
    texture_size (int): Width and height of the texture in pixels.
    block_size (float): Edge length of each block.

    Return:
    (dict): Dictionary with keys 'walls', 'texture', 'blocks' and
    'ground'.
    """
    maze_size = validate_maze_size(maze_size)
    check_texture_size(maze_size, texture_size)

    walls = generate_maze(maze_size, seed=seed)
    texture = rasterize_maze(walls, texture_size)
    return {
        'walls': walls,
        'texture': texture,
        'blocks': tile_blocks(texture, maze_size, block_size),
        'ground': ground_plane(maze_size),
    }
