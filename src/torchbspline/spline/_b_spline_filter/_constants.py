"""Constants for the B-spline filter."""

# Boundary condition selectors (rows of BOUNDARY_CONDITIONS)
BOUNDARY_ZERO_VALUE: int = 0
BOUNDARY_ZERO_SLOPE: int = 1
BOUNDARY_ZERO_CURVATURE: int = 2

# Weight of the virtual exterior node folded into each edge node.
# Columns: node 0, node 1, node M-1, node M
BOUNDARY_CONDITIONS = [
    [-4.0, -1.0, -1.0, -4.0],
    [0.0, 1.0, 1.0, 0.0],
    [2.0, -1.0, -1.0, 2.0],
]

# Half-bandwidth of the penalty and data matrices
BANDS: int = 3

# Node search
MIN_NODE_INTERVALS: int = 10
MIN_NODES_PER_WAVELENGTH: float = 2.0
TARGET_NODES_PER_WAVELENGTH: float = 4.0
MAX_NODES_PER_WAVELENGTH: float = 15.0
MAX_POINTS_PER_INTERVAL: float = 2.0

# Integrals over each unit interval of the product of the k-th derivatives
# of two unit basis functions, QPARTS[k][d][c]:
#   d: separation of the two nodes (0..3)
#   c: unit interval [c - 2, c - 1] relative to the left node (0..3)
QPARTS = {
    1: [
        [0.11250, 0.63750, 0.63750, 0.11250],
        [0.00000, 0.13125, -0.54375, 0.13125],
        [0.00000, 0.00000, -0.22500, -0.22500],
        [0.00000, 0.00000, 0.00000, -0.01875],
    ],
    2: [
        [0.750, 2.250, 2.250, 0.750],
        [0.000, -1.125, -1.125, -1.125],
        [0.000, 0.000, 0.000, 0.000],
        [0.000, 0.000, 0.000, 0.375],
    ],
    3: [
        [2.25, 20.25, 20.25, 2.25],
        [0.00, -6.75, -20.25, -6.75],
        [0.00, 0.00, 6.75, 6.75],
        [0.00, 0.00, 0.00, -2.25],
    ],
}
