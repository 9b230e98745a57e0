"""
Dimensional calculation engine.

Pure Python math. Given dimensions in any supported unit, convert to feet,
apply the shape's volume formula and derive weight from the configured density.
"""
