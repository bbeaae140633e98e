import argparse
import logging
import time

from .maze_generation import open_passages, is_perfect_maze
from .rasterization import save_texture, DEFAULT_TEXTURE_SIZE
from .tiling import build_maze_scene, DEFAULT_BLOCK_SIZE

"""This script handles the run-logic for maze generation. It builds a
maze of the requested size, optionally writes its texture to disk and
prints a summary of the result.
"""


logger = logging.getLogger(__name__)


def setup_logging(debug=False):
    """Configures the root logger. In debug mode everything is written
    to debug.txt, otherwise only warnings reach stderr.
    """
    if debug:
        logging.basicConfig(format='%(asctime)s - %(filename)s - '
                                   '%(funcName)s - %(message)s',
                            level=logging.DEBUG,
                            filename='debug.txt', filemode='w')
    else:
        logging.basicConfig(format='%(asctime)s - %(filename)s - '
                                   '%(funcName)s - %(message)s',
                            level=logging.WARNING)


def extract_maze_metadata(maze_size, seed=None,
                          texture_size=DEFAULT_TEXTURE_SIZE,
                          block_size=DEFAULT_BLOCK_SIZE, output=None):
    """Generates a maze and summarizes it.

    Parameters:
    maze_size (int): Number of cells along one side of the maze.
    seed (int or None): Seed for the random source.
    texture_size (int): Width and height of the texture in pixels.
    block_size (float): Edge length of each block.
    output (str or None): Path to write the texture to.

    Return:
    metadata (dict): Summary of the maze and the time it took.
    """
    t0 = time.time()
    scene = build_maze_scene(maze_size, seed=seed, texture_size=texture_size,
                             block_size=block_size)
    if output:
        save_texture(scene['texture'], output)

    metadata = {"maze": {
        "size": maze_size,
        "open passages": len(open_passages(scene['walls'])),
        "blocks": len(scene['blocks']),
        "perfect": is_perfect_maze(scene['walls']),
    }}
    metadata.update({"generate time": time.time() - t0})
    return metadata


def build_parser():
    parser = argparse.ArgumentParser(
        description='Generate a perfect maze with randomized Kruskal\'s '
                    'algorithm.')
    parser.add_argument('--size', help='Number of cells along one side.',
                        type=int, required=True)
    parser.add_argument('--seed', help='Seed for the random source.',
                        type=int, required=False, default=None)
    parser.add_argument('--texture-size', help='Texture side in pixels.',
                        type=int, required=False,
                        default=DEFAULT_TEXTURE_SIZE)
    parser.add_argument('--block-size', help='Edge length of each block.',
                        type=float, required=False,
                        default=DEFAULT_BLOCK_SIZE)
    parser.add_argument('--output', help='File system path for the texture.',
                        required=False, default=None)
    parser.add_argument('--debug', help='Whether to turn on debug mode.',
                        action='store_true')
    return parser


def main(argv=None):
    """Takes maze options from the command line and prints metadata.

    Arguments:
    --size (int): Number of cells along one side of the maze.
    --seed (int): Seed for the random source.
    --texture-size (int): Texture side in pixels.
    --block-size (float): Edge length of each block.
    --output (File path): Where to write the texture image.
    --debug (bool): Whether to turn on debug mode.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    try:
        meta = extract_maze_metadata(args.size, seed=args.seed,
                                     texture_size=args.texture_size,
                                     block_size=args.block_size,
                                     output=args.output)
    except (TypeError, ValueError) as e:
        logger.debug('Rejected options: %s', e)
        parser.error(str(e))
    print(meta)
    return meta


if __name__ == "__main__":
    main()
