"""
worley

3D Worley (cellular) noise fields with one feature point per lattice cell.
"""

from worley.noise import worley_noise_3d, to_volume, field_summary, validate_arguments
from worley.features import generate_feature_points, cell_edge_length

__all__ = [
    "worley_noise_3d",
    "to_volume",
    "field_summary",
    "validate_arguments",
    "generate_feature_points",
    "cell_edge_length",
]
