from .unionfind import UnionFind
from .maze_generation import generate_maze, is_perfect_maze, MazeWalls
from .tiling import build_maze_scene
