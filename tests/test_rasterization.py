import os
import tempfile
import unittest

import numpy as np
from PIL import Image

from kruskal_maze.maze_generation import MazeWalls, generate_maze
from kruskal_maze.rasterization import (PATH_COLOR, WALL_COLOR, band_edges,
                                        rasterize_maze, save_texture,
                                        texture_image)
from kruskal_maze.tiling import (build_maze_scene, ground_plane,
                                 sample_occupancy, tile_blocks)


class RasterizationTests(unittest.TestCase):
    def test_band_edges(self):
        edges = band_edges(1, 512)
        self.assertEqual(edges.tolist(), [0, 171, 341, 512])
        self.assertTrue(np.all(np.diff(band_edges(20, 41)) == 1))

    def test_texture_too_small(self):
        walls = generate_maze(10, seed=0)
        with self.assertRaises(ValueError):
            rasterize_maze(walls, texture_size=20)
        self.assertEqual(rasterize_maze(walls, texture_size=21).shape,
                         (21, 21))

    def test_single_cell_texture(self):
        texture = rasterize_maze(generate_maze(1, seed=0))
        self.assertEqual(texture.shape, (512, 512))
        self.assertEqual(texture.dtype, np.uint8)
        self.assertTrue(np.all(texture[171:341, 171:341] == PATH_COLOR))
        self.assertEqual(np.count_nonzero(texture == PATH_COLOR), 170 * 170)

    def test_colors_and_border(self):
        texture = rasterize_maze(generate_maze(7, seed=3))
        self.assertEqual(set(np.unique(texture).tolist()),
                         {WALL_COLOR, PATH_COLOR})
        edges = band_edges(7)
        self.assertTrue(np.all(texture[:edges[1], :] == WALL_COLOR))
        self.assertTrue(np.all(texture[edges[-2]:, :] == WALL_COLOR))
        self.assertTrue(np.all(texture[:, :edges[1]] == WALL_COLOR))
        self.assertTrue(np.all(texture[:, edges[-2]:] == WALL_COLOR))

    def test_custom_colors(self):
        texture = rasterize_maze(generate_maze(3, seed=3), texture_size=70,
                                 wall_color=40, path_color=200)
        self.assertEqual(set(np.unique(texture).tolist()), {40, 200})

    def test_texture_follows_walls(self):
        walls = MazeWalls(np.array([[False, True]]),
                          np.array([[True], [False]]))
        texture = rasterize_maze(walls, texture_size=50)
        # 5 bands of 10 pixels, sample the middle of each
        bands = texture[5::10, 5::10]
        expected = np.array([
            [0, 0, 0, 0, 0],
            [0, 1, 0, 1, 0],
            [0, 1, 0, 0, 0],
            [0, 1, 1, 1, 0],
            [0, 0, 0, 0, 0],
        ]) * PATH_COLOR
        self.assertTrue(np.array_equal(bands, expected))

    def test_texture_image(self):
        texture = rasterize_maze(generate_maze(4, seed=1), texture_size=90)
        image = texture_image(texture)
        self.assertEqual(image.mode, 'L')
        self.assertEqual(image.size, (90, 90))

    def test_save_texture(self):
        texture = rasterize_maze(generate_maze(4, seed=1), texture_size=90)
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, 'maze.png')
            save_texture(texture, path)
            with Image.open(path) as image:
                self.assertTrue(np.array_equal(np.array(image), texture))


class TilingTests(unittest.TestCase):
    def test_occupancy_matches_walls(self):
        maze_size = 6
        walls = generate_maze(maze_size, seed=8)
        occupancy = sample_occupancy(rasterize_maze(walls), maze_size)
        self.assertEqual(occupancy.shape, (13, 13))
        for r in range(maze_size):
            for c in range(maze_size):
                self.assertFalse(occupancy[2 * r + 1, 2 * c + 1])
        for r in range(maze_size):
            for c in range(maze_size - 1):
                self.assertEqual(occupancy[2 * r + 1, 2 * c + 2],
                                 walls.vertical_walls[r, c])
        for r in range(maze_size - 1):
            for c in range(maze_size):
                self.assertEqual(occupancy[2 * r + 2, 2 * c + 1],
                                 walls.horizontal_walls[r, c])
        self.assertTrue(np.all(occupancy[::2, ::2]))

    def test_occupancy_at_odd_texture_sizes(self):
        for maze_size, texture_size in [(5, 11), (5, 13), (9, 100), (3, 512)]:
            walls = generate_maze(maze_size, seed=maze_size)
            texture = rasterize_maze(walls, texture_size)
            occupancy = sample_occupancy(texture, maze_size)
            self.assertEqual(np.count_nonzero(~occupancy),
                             2 * maze_size * maze_size - 1)

    def test_occupancy_rejects_non_square(self):
        with self.assertRaises(ValueError):
            sample_occupancy(np.zeros((10, 12), dtype=np.uint8), 2)

    def test_single_cell_blocks(self):
        texture = rasterize_maze(generate_maze(1, seed=0))
        blocks = tile_blocks(texture, 1)
        self.assertEqual(len(blocks), 8)
        self.assertNotIn((0.0, 0.0), [(b.x, b.z) for b in blocks])
        self.assertEqual({b.x for b in blocks}, {-1.0, 0.0, 1.0})
        self.assertTrue(all(b.y == 0.5 and b.size == 1.0 for b in blocks))
        self.assertEqual((blocks[0].x, blocks[0].z), (-1.0, -1.0))

    def test_block_size(self):
        texture = rasterize_maze(generate_maze(2, seed=0), texture_size=50)
        blocks = tile_blocks(texture, 2, block_size=0.5)
        self.assertTrue(all(b.y == 0.25 and b.size == 0.5 for b in blocks))

    def test_ground_plane(self):
        ground = ground_plane(4)
        self.assertEqual((ground.width, ground.depth), (9, 9))
        self.assertEqual(ground.center, (0.0, 0.0, 0.0))

    def test_build_maze_scene(self):
        scene = build_maze_scene(5, seed=11, texture_size=128)
        self.assertEqual(set(scene), {'walls', 'texture', 'blocks', 'ground'})
        self.assertEqual(scene['texture'].shape, (128, 128))
        self.assertEqual(len(scene['blocks']), 11 * 11 - (2 * 25 - 1))
        self.assertEqual(scene['ground'].width, 11)
        for block in scene['blocks']:
            self.assertLessEqual(abs(block.x), 5)
            self.assertLessEqual(abs(block.z), 5)

    def test_build_maze_scene_is_repeatable(self):
        first = build_maze_scene(4, seed=2, texture_size=64)
        second = build_maze_scene(4, seed=2, texture_size=64)
        self.assertTrue(np.array_equal(first['texture'], second['texture']))
        self.assertEqual(first['blocks'], second['blocks'])

    def test_build_maze_scene_rejects_bad_input(self):
        with self.assertRaises(ValueError):
            build_maze_scene(0)
        with self.assertRaises(ValueError):
            build_maze_scene(10, texture_size=15)


if __name__ == "__main__":
    unittest.main()
