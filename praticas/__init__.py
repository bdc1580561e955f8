"""Small programming exercises: text counting, complex numbers, offset vectors, a queue, person records and the Game of Life."""

__version__ = "0.1.0"