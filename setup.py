from setuptools import setup, find_packages
import voronoigame

with open('README.md') as fh:
    long_description = fh.read()


setup(
    name='VoronoiGame',
    version=voronoigame.__version__,
    author='voronoigame developers',
    license='MIT',
    description='Incremental Delaunay triangulation and Voronoi regions '
                'for the Voronoi game.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    classifiers=['License :: OSI Approved :: MIT License',
                 'Topic :: Scientific/Engineering :: Mathematics',
                 'Programming Language :: Python :: 3',
                 'Intended Audience :: Developers'],
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.7',
    install_requires=['numpy', 'matplotlib'],
    extras_require={'tests': ['pytest', 'scipy']},
)
