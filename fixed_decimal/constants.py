"""Numeric constants shared by every fixed-point value.

Centralizes the scale and bounds used across the package.
"""

# Number of fractional digits carried by every Decimal.
# Values are stored as integers scaled by 10^PRECISION.
PRECISION = 18

# Maximum uint256 value, used as the raw MAX_DECIMAL sentinel
UINT256_MAX = 2**256 - 1
