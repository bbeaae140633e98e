from setuptools import setup, find_packages


setup(
    name='KruskalMaze',
    version='0.1dev',
    packages=find_packages(exclude=['ez_setup', 'tests', 'tests.*']),
    install_requires=[
        'numpy',
        'opencv-python-headless',
        'Pillow',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    license='Creative Commons Attribution-Noncommercial-Share Alike license',
    long_description=open('README.txt').read(),
)
