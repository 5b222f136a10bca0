"""
Constants declarations for geodatum
"""

# Datum against which every Helmert transform in the registry is expressed
REFERENCE_DATUM = 'WGS84'

# OS National Grid projection (Transverse Mercator on Airy 1830)
GRID_DATUM = 'OSGB36'
GRID_ELLIPSOID = 'Airy1830'
GRID_F0 = 0.9996012717  # Scale factor on the central meridian
GRID_LAT0 = 49.  # True origin latitude (degrees)
GRID_LON0 = -2.  # True origin longitude (degrees)
GRID_N0 = -100_000.  # Northing of true origin (meters)
GRID_E0 = 400_000.  # Easting of true origin (meters)
GRID_PRECISION = 3  # Decimal places (millimeters) of projected eastings/northings

# Inverse projection iteration controls
MAX_ITERATIONS = 100
CONVERGENCE_TOLERANCE = 1e-5  # Meters of unresolved meridional arc
