"""
Synthetic point clouds for dimensionality-reduction demos.

This package provides a small point/color model, vector helpers and a set of
generators for grids, clusters, circles, rings, knots, walks and simplices.
"""

from .vectors import (
    InvalidInputError,
    resolve_rng,
    dist,
    normal_vector,
    scale,
    add,
    distance_matrix
)

from .points import (
    Point,
    DEFAULT_COLOR,
    add_spatial_colors,
    angle_color,
    make_points,
    points_to_frame
)

from .generators import (
    grid_data,
    gaussian_data,
    long_gaussian_data,
    cube_data,
    simplex_data,
    circle_data,
    random_circle_data,
    random_circle_cluster_data,
    two_different_clusters_data_2d,
    two_clusters_data,
    two_different_clusters_data,
    three_clusters_data_2d,
    three_clusters_data,
    subset_clusters_data,
    long_cluster_data,
    unlink_data,
    link_data,
    trefoil_data,
    ortho_curve,
    random_walk,
    random_jump
)

__all__ = [
    # Errors and randomness
    'InvalidInputError',
    'resolve_rng',

    # Vector helpers
    'dist',
    'normal_vector',
    'scale',
    'add',
    'distance_matrix',

    # Point model
    'Point',
    'DEFAULT_COLOR',
    'add_spatial_colors',
    'angle_color',
    'make_points',
    'points_to_frame',

    # Generators
    'grid_data',
    'gaussian_data',
    'long_gaussian_data',
    'cube_data',
    'simplex_data',
    'circle_data',
    'random_circle_data',
    'random_circle_cluster_data',
    'two_different_clusters_data_2d',
    'two_clusters_data',
    'two_different_clusters_data',
    'three_clusters_data_2d',
    'three_clusters_data',
    'subset_clusters_data',
    'long_cluster_data',
    'unlink_data',
    'link_data',
    'trefoil_data',
    'ortho_curve',
    'random_walk',
    'random_jump'
]
