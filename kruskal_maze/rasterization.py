import logging
import numpy as np
import cv2
from PIL import Image

from .maze_generation import maze_size_of


logger = logging.getLogger(__name__)

DEFAULT_TEXTURE_SIZE = 512
WALL_COLOR = 0
PATH_COLOR = 255


def check_texture_size(maze_size, texture_size):
    """Raises ValueError if a texture of texture_size pixels cannot give
    every band of a maze_size maze at least one pixel.
    """
    bands = 2 * maze_size + 1
    if texture_size < bands:
        raise ValueError('texture_size %d is too small for %d bands of a '
                         '%dx%d maze' % (texture_size, bands,
                                         maze_size, maze_size))


def band_edges(maze_size, texture_size=DEFAULT_TEXTURE_SIZE):
    """Returns the pixel boundaries of the 2 * maze_size + 1 bands a
    texture side is divided into.

    Parameters:
    maze_size (int): Number of cells along one side of the maze.
    texture_size (int): Width and height of the texture in pixels.

    Return:
    (numpy array): 2 * maze_size + 2 increasing pixel offsets, from 0
    to texture_size. Band k covers [edges[k], edges[k + 1]).
    """
    check_texture_size(maze_size, texture_size)
    bands = 2 * maze_size + 1
    cell_px = texture_size / bands
    return np.round(np.arange(bands + 1) * cell_px).astype(int)


def fill_band(texture, edges, band_row, band_col, color):
    """Fills one sub-cell of the texture with color."""
    top_left = (int(edges[band_col]), int(edges[band_row]))
    # cv2.rectangle includes the bottom right corner
    bottom_right = (int(edges[band_col + 1]) - 1, int(edges[band_row + 1]) - 1)
    cv2.rectangle(texture, top_left, bottom_right, int(color), thickness=-1)


def rasterize_maze(walls, texture_size=DEFAULT_TEXTURE_SIZE,
                   wall_color=WALL_COLOR, path_color=PATH_COLOR):
    """Draws a maze as a square grayscale texture. Cell (r, c) covers
    band (2r + 1, 2c + 1), an opened wall covers the band between its
    two cells, and everything else, including the outer border, is
    left in wall_color.

    Parameters:
    walls (MazeWalls): Wall grids as returned by generate_maze.
    texture_size (int): Width and height of the texture in pixels.
    wall_color (int): Gray level of walls.
    path_color (int): Gray level of cells and opened walls.

    Return:
    texture (numpy array): uint8 array of shape
    (texture_size, texture_size).
    """
    maze_size = maze_size_of(walls)
    horizontal_walls, vertical_walls = walls
    edges = band_edges(maze_size, texture_size)

    texture = np.full((texture_size, texture_size), wall_color,
                      dtype=np.uint8)
    for row in range(maze_size):
        for col in range(maze_size):
            fill_band(texture, edges, 2 * row + 1, 2 * col + 1, path_color)

    for row, col in np.argwhere(np.logical_not(vertical_walls)):
        fill_band(texture, edges, 2 * row + 1, 2 * col + 2, path_color)

    for row, col in np.argwhere(np.logical_not(horizontal_walls)):
        fill_band(texture, edges, 2 * row + 2, 2 * col + 1, path_color)

    logger.debug('Rasterized %dx%d maze to %dpx texture',
                 maze_size, maze_size, texture_size)
    return texture


def texture_image(texture):
    """Returns the texture as a grayscale PIL image."""
    return Image.fromarray(np.asarray(texture, dtype=np.uint8))


def save_texture(texture, path):
    """Writes the texture to path. The format follows the file
    extension.
    """
    texture_image(texture).save(path)
    logger.debug('Written %s', path)
