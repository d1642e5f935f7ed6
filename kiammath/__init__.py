"""2D vectors, points, boxes and matrices, block arrays, 3D grids, a random generator and Cholesky factorisation."""

__version__ = "0.1.0"

__all__ = ["bbox2", "blockarray", "cholesky", "garray", "matrix2", "matrix3d", "rnd", "vect2"]