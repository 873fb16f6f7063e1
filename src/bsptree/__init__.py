"""bsptree - 2D Binary Space Partitioning for the Painter's Algorithm.

bsptree builds a BSP tree over 2D polygons by classifying and splitting them
against partition planes, then walks the tree to produce a back-to-front
polygon order for any viewpoint. Drawing polygons in that order gives correct
hidden-surface results without a depth buffer.

Example:
    $ bsptree order --view-x 250 --view-y 450

This prints the painter's order of the built-in sample scene as seen from
(250, 450).
"""

__version__ = "0.1.0"
__author__ = "bsptree contributors"

__all__ = ["__author__", "__version__"]
