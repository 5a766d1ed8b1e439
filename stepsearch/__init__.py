"""
Step-driven graph search engine.

Incremental breadth-first, depth-first, beam and A* search over walled
grids and k-nearest-neighbour point graphs, advanced one step at a time
by an external driver.
"""

__version__ = "0.1.0"
